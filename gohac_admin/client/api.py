"""
Client REST de l'API admin Gohac.

Session requests (cookies de session backend). Toute réponse 401 déclenche
le callback on_session_expired puis lève SessionExpired : c'est à l'appelant
(AuthSession, UI) de décider de la navigation vers le login.
"""
import logging
from typing import Any, BinaryIO, Callable, Dict, List, Optional

import requests

from .. import config
from ..errors import ApiError, SessionExpired

log = logging.getLogger(__name__)

SessionExpiredHandler = Callable[[requests.Response], None]


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"HTTP {resp.status_code} {resp.reason or ''}".strip()


class ApiClient:

    def __init__(self, base_url: Optional[str] = None,
                 on_session_expired: Optional[SessionExpiredHandler] = None,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or config.api_url()).rstrip("/")
        self.on_session_expired = on_session_expired
        self.timeout = timeout if timeout is not None else config.http_timeout()
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

        self.auth       = AuthAPI(self)
        self.pages      = ResourceAPI(self, "/v1/pages")
        self.posts      = PostsAPI(self, "/v1/posts")
        self.categories = ResourceAPI(self, "/v1/categories")
        self.menus      = MenusAPI(self, "/v1/menus")
        self.users      = ResourceAPI(self, "/v1/users")
        self.media      = MediaAPI(self)
        self.settings   = SettingsAPI(self)
        self.dashboard  = DashboardAPI(self)
        self.uploads    = UploadsAPI(self)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs) -> Any:
        """Appel HTTP → JSON décodé (None si corps vide). Lève ApiError/SessionExpired."""
        kwargs.setdefault("timeout", self.timeout)
        url = self.url(path)
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            log.error("%s %s — échec réseau : %s", method, url, e)
            raise ApiError(f"Network error: {e}") from e

        if resp.status_code == 401:
            log.info("%s %s — 401, session expirée", method, url)
            if self.on_session_expired is not None:
                self.on_session_expired(resp)
            raise SessionExpired(_error_message(resp), status=401)

        if not resp.ok:
            message = _error_message(resp)
            log.warning("%s %s — %s : %s", method, url, resp.status_code, message)
            raise ApiError(message, status=resp.status_code, payload=resp.text)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Any:
        return self.request("PUT", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request("DELETE", path, **kwargs)


def unwrap_list(body: Any) -> List[dict]:
    """Réponses liste : {"data": [...]} ou tableau brut."""
    if isinstance(body, dict):
        body = body.get("data")
    return list(body) if isinstance(body, list) else []


class ResourceAPI:
    """CRUD générique list/get/create/update/delete sur un préfixe REST."""

    def __init__(self, client: ApiClient, path: str):
        self.client = client
        self.path = path

    def list(self, **params) -> List[dict]:
        params = {k: v for k, v in params.items() if v}
        return unwrap_list(self.client.get(self.path, params=params or None))

    def get(self, resource_id: str) -> dict:
        return self.client.get(f"{self.path}/{resource_id}")

    def create(self, data: Dict[str, Any]) -> dict:
        return self.client.post(self.path, json=data)

    def update(self, resource_id: str, data: Dict[str, Any]) -> dict:
        return self.client.put(f"{self.path}/{resource_id}", json=data)

    def delete(self, resource_id: str) -> Any:
        return self.client.delete(f"{self.path}/{resource_id}")


class PostsAPI(ResourceAPI):

    def list(self, status: Optional[str] = None) -> List[dict]:
        return super().list(status=status)


class MenusAPI(ResourceAPI):

    def get_public(self, menu_id: str) -> dict:
        return self.client.get(f"/public/menus/{menu_id}")


class AuthAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def login(self, email: str, password: str) -> dict:
        return self.client.post("/auth/login", json={"email": email, "password": password})

    def me(self) -> dict:
        return self.client.get("/auth/me")

    def update_profile(self, name: Optional[str] = None, password: Optional[str] = None) -> dict:
        data = {k: v for k, v in (("name", name), ("password", password)) if v}
        return self.client.put("/auth/profile", json=data)

    def logout(self) -> Any:
        return self.client.post("/auth/logout")


class MediaAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def list(self) -> List[dict]:
        return unwrap_list(self.client.get("/v1/media"))

    def get(self, filename: str) -> dict:
        return self.client.get(f"/v1/media/{filename}")


class SettingsAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def get(self) -> dict:
        return self.client.get("/public/settings")

    def update(self, data: Dict[str, Any]) -> dict:
        return self.client.put("/v1/settings", json=data)


class DashboardAPI:

    def __init__(self, client: ApiClient):
        self.client = client

    def stats(self) -> dict:
        return self.client.get("/v1/dashboard/stats")


class UploadsAPI:
    """Upload d'images : renvoie {"url": ...} — utilisé par ImageUpload."""

    def __init__(self, client: ApiClient):
        self.client = client

    def upload(self, filename: str, fileobj: BinaryIO, content_type: str) -> dict:
        return self.client.post("/v1/upload", files={"file": (filename, fileobj, content_type)})

    def from_url(self, url: str) -> dict:
        return self.client.post("/v1/upload/from-url", json={"url": url})
