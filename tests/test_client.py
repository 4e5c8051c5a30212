"""Tests client REST — URLs, enveloppes, erreurs, signal session expirée, AuthSession."""
from unittest.mock import MagicMock

import pytest
import requests

from gohac_admin.client import ApiClient, AuthSession, unwrap_list
from gohac_admin.errors import ApiError, LoginError, NotAuthenticated, SessionExpired

from conftest import make_response


def _call(http, i=-1):
    args, kwargs = http.request.call_args_list[i]
    return args[0], args[1], kwargs


# ── Requêtes ──────────────────────────────────────────────────────────────────

def test_pages_list_unwraps_data_envelope(api, http):
    http.request.return_value = make_response(200, {"data": [{"id": "p1"}]})
    assert api.pages.list() == [{"id": "p1"}]
    method, url, kwargs = _call(http)
    assert (method, url) == ("GET", "http://cms.test/api/v1/pages")
    assert kwargs["timeout"] == 5


def test_posts_list_with_status_filter(api, http):
    http.request.return_value = make_response(200, {"data": []})
    api.posts.list(status="published")
    assert _call(http)[2]["params"] == {"status": "published"}
    api.posts.list()
    assert _call(http)[2]["params"] is None


def test_crud_paths(api, http):
    api.categories.create({"name": "News"})
    assert _call(http)[:2] == ("POST", "http://cms.test/api/v1/categories")
    assert _call(http)[2]["json"] == {"name": "News"}
    api.users.update("u1", {"name": "Sam"})
    assert _call(http)[:2] == ("PUT", "http://cms.test/api/v1/users/u1")
    api.menus.delete("m1")
    assert _call(http)[:2] == ("DELETE", "http://cms.test/api/v1/menus/m1")
    api.menus.get_public("m1")
    assert _call(http)[:2] == ("GET", "http://cms.test/api/public/menus/m1")
    api.settings.get()
    assert _call(http)[1] == "http://cms.test/api/public/settings"
    api.settings.update({"site_name": "X"})
    assert _call(http)[:2] == ("PUT", "http://cms.test/api/v1/settings")
    api.dashboard.stats()
    assert _call(http)[1] == "http://cms.test/api/v1/dashboard/stats"
    api.media.get("a.png")
    assert _call(http)[1] == "http://cms.test/api/v1/media/a.png"


def test_upload_sends_multipart(api, http):
    http.request.return_value = make_response(200, {"url": "/uploads/a.png"})
    f = object()
    assert api.uploads.upload("a.png", f, "image/png") == {"url": "/uploads/a.png"}
    method, url, kwargs = _call(http)
    assert url == "http://cms.test/api/v1/upload"
    assert kwargs["files"] == {"file": ("a.png", f, "image/png")}
    api.uploads.from_url("https://x/y.png")
    assert _call(http)[1] == "http://cms.test/api/v1/upload/from-url"


def test_empty_body_returns_none(api, http):
    http.request.return_value = make_response(204)
    assert api.pages.delete("p1") is None


def test_unwrap_list_variants():
    assert unwrap_list([{"a": 1}]) == [{"a": 1}]
    assert unwrap_list({"data": None}) == []
    assert unwrap_list(None) == []


# ── Erreurs ───────────────────────────────────────────────────────────────────

def test_error_uses_backend_message(api, http):
    http.request.return_value = make_response(409, {"error": "Slug already exists"})
    with pytest.raises(ApiError) as exc:
        api.pages.create({"slug": "home"})
    assert exc.value.status == 409
    assert str(exc.value) == "Slug already exists"


def test_network_error_wrapped(api, http):
    http.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ApiError) as exc:
        api.pages.list()
    assert exc.value.status is None


def test_401_signals_session_expired(http):
    handler = MagicMock()
    client = ApiClient(base_url="http://cms.test/api", session=http, on_session_expired=handler)
    http.request.return_value = make_response(401, {"error": "unauthorized"})
    with pytest.raises(SessionExpired):
        client.pages.list()
    handler.assert_called_once()
    assert handler.call_args[0][0].status_code == 401


def test_base_url_from_env(monkeypatch, http):
    monkeypatch.setenv("GOHAC_API_URL", "https://admin.example.com/api/")
    assert ApiClient(session=http).url("/v1/pages") == "https://admin.example.com/api/v1/pages"


# ── AuthSession ───────────────────────────────────────────────────────────────

class TestAuthSession:

    def test_login_stores_user(self, api, http):
        http.request.side_effect = [
            make_response(200, {"success": True}),
            make_response(200, {"user": {"id": "u1", "email": "a@b.c"}}),
        ]
        auth = AuthSession(api)
        assert auth.login("a@b.c", "pw") == {"id": "u1", "email": "a@b.c"}
        assert auth.is_authenticated
        assert _call(http, 0)[2]["json"] == {"email": "a@b.c", "password": "pw"}

    def test_login_failure_uses_backend_error(self, api, http):
        http.request.return_value = make_response(400, {"error": "Invalid credentials"})
        auth = AuthSession(api)
        with pytest.raises(LoginError, match="Invalid credentials"):
            auth.login("a@b.c", "bad")
        assert not auth.is_authenticated

    def test_check_anonymous_on_error(self, api, http):
        http.request.return_value = make_response(500, {"error": "boom"})
        auth = AuthSession(api)
        assert auth.check() is None
        with pytest.raises(NotAuthenticated):
            auth.require_user()

    def test_expired_session_clears_user_and_navigates(self, api, http):
        navigate = MagicMock()
        auth = AuthSession(api, on_expired=navigate, login_path="/admin/login")
        auth.user = {"id": "u1"}
        http.request.return_value = make_response(401, {})
        with pytest.raises(SessionExpired):
            api.pages.list()
        assert auth.user is None
        navigate.assert_called_once_with("/admin/login")

    def test_logout_clears_user_even_on_backend_error(self, api, http):
        auth = AuthSession(api)
        auth.user = {"id": "u1"}
        http.request.return_value = make_response(500, {})
        auth.logout()
        assert auth.user is None
