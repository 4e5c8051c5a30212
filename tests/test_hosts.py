"""Tests formulaires hôtes — slug, blocs, menus, profil, listes."""
import json

import pytest

from gohac_admin.blocks import Block
from gohac_admin.client import AuthSession
from gohac_admin.errors import ApiError, FormError, NotAuthenticated
from gohac_admin.hosts import (
    CategoryEditor, MenuEditor, PageEditor, PostEditor, ProfileEditor, ResourceList, slugify,
)

from conftest import make_response


def _sent_json(http, i=-1):
    return http.request.call_args_list[i][1]["json"]


# ── slugify ───────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text,expected", [
    ("Hello, World!", "hello-world"),
    ("  About   Us  ", "about-us"),
    ("snake_case--and  dashes", "snake-case-and-dashes"),
    ("--Edge--", "edge"),
    ("Café au lait", "caf-au-lait"),
    ("", ""),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


# ── PageEditor ────────────────────────────────────────────────────────────────

def test_page_load_decodes_blocks_and_tolerates_missing_ids(api, http):
    http.request.return_value = make_response(200, {
        "id": "p1", "title": "Home", "slug": "home", "status": "published",
        "blocks": [{"type": "hero", "data": {"title": "Hi"}}, {"id": "b2", "type": "text"}],
    })
    page = PageEditor(api, "p1")
    page.load()
    assert (page.title, page.slug, page.status) == ("Home", "home", "published")
    assert page.blocks[0].id.startswith("block-")
    assert page.blocks[1] == Block(id="b2", type="text", data={})
    assert page.block_editor.blocks == tuple(page.blocks)


def test_page_editor_changes_flow_back_to_host(api, http):
    page = PageEditor(api)
    page.block_editor.add("hero")
    page.block_editor.form_for(0).change("title", "Welcome")
    assert page.blocks[0].data == {"title": "Welcome", "subtitle": ""}


def test_page_create_sends_blocks_array(api, http):
    http.request.return_value = make_response(201, {"id": "new-id"})
    page = PageEditor(api)
    page.set_title("About Us")
    page.block_editor.add("cta")
    page.submit()
    method, url = http.request.call_args[0]
    assert (method, url) == ("POST", "http://cms.test/api/v1/pages")
    body = _sent_json(http)
    assert body["slug"] == "about-us"
    assert body["blocks"][0]["type"] == "cta"
    assert page.content_id == "new-id"


def test_page_update_uses_put(api, http):
    page = PageEditor(api, "p1")
    page.title, page.slug = "T", "t"
    page.submit()
    assert http.request.call_args[0] == ("PUT", "http://cms.test/api/v1/pages/p1")


def test_edit_mode_does_not_autofill_slug(api):
    page = PageEditor(api, "p1")
    page.set_title("Changed Title")
    assert page.slug == ""


def test_submit_requires_title_and_slug(api, http):
    page = PageEditor(api)
    with pytest.raises(FormError, match="Title and slug are required."):
        page.submit()
    http.request.assert_not_called()


# ── PostEditor ────────────────────────────────────────────────────────────────

def test_post_load_parses_content_string_and_categories(api, http):
    http.request.return_value = make_response(200, {
        "id": "x", "title": "Post", "slug": "post", "status": "draft",
        "content": json.dumps([{"id": "b1", "type": "faq", "data": {"items": []}}]),
        "categories": [{"id": "c1"}, {"id": "c2"}],
    })
    post = PostEditor(api, "x")
    post.load()
    assert [b.type for b in post.blocks] == ["faq"]
    assert post.category_ids == ["c1", "c2"]


def test_post_load_invalid_content_gives_no_blocks(api, http):
    http.request.return_value = make_response(200, {"title": "P", "slug": "p", "content": "<p>legacy</p>",
                                                    "category_ids": ["c9"]})
    post = PostEditor(api, "x")
    post.load()
    assert post.blocks == []
    assert post.category_ids == ["c9"]


def test_post_submit_content_is_json_text_or_empty(api, http):
    post = PostEditor(api)
    post.set_title("Hello")
    post.submit()
    assert _sent_json(http)["content"] == ""
    assert _sent_json(http)["category_ids"] == []

    post.block_editor.add("text")
    post.submit()
    content = _sent_json(http)["content"]
    assert isinstance(content, str)
    assert json.loads(content)[0]["type"] == "text"


# ── Catégories / menus ────────────────────────────────────────────────────────

def test_category_slug_autofill(api, http):
    cat = CategoryEditor(api)
    cat.set_name("Product News")
    assert cat.slug == "product-news"
    cat.set_name("Other")
    assert cat.slug == "product-news"
    cat.submit()
    assert _sent_json(http) == {"name": "Other", "slug": "product-news", "description": ""}


def test_menu_items_edit_and_move(api, http):
    menu = MenuEditor(api)
    menu.name = "Main"
    menu.add_item()
    menu.add_item()
    menu.change_item(0, "label", "Home")
    menu.change_item(0, "url", "/")
    menu.change_item(1, "label", "Blog")
    menu.change_item(1, "url", "/blog")
    assert menu.move_item(1, "up") is True
    assert menu.move_item(0, "up") is False
    assert [i["label"] for i in menu.items] == ["Blog", "Home"]
    assert menu.items[0]["target"] == "_self"
    menu.submit()
    assert _sent_json(http)["items"][1] == {"label": "Home", "url": "/", "target": "_self"}


def test_menu_move_rejects_unknown_direction(api):
    menu = MenuEditor(api)
    menu.add_item()
    menu.add_item()
    menu.change_item(0, "label", "First")
    with pytest.raises(ValueError):
        menu.move_item(0, "left")
    assert menu.items[0]["label"] == "First"


def test_menu_validation(api):
    menu = MenuEditor(api)
    with pytest.raises(FormError, match="Menu name is required"):
        menu.submit()
    menu.name = "Main"
    menu.add_item()
    with pytest.raises(FormError, match="Menu item 1 is missing label or URL"):
        menu.submit()


# ── ResourceList ──────────────────────────────────────────────────────────────

def test_delete_then_refresh(api, http):
    http.request.side_effect = [
        make_response(200, {"data": [{"id": "a"}, {"id": "b"}]}),
        make_response(204),
        make_response(200, {"data": [{"id": "b"}]}),
    ]
    pages = ResourceList(api.pages)
    assert [p["id"] for p in pages.refresh()] == ["a", "b"]
    assert [p["id"] for p in pages.delete("a")] == ["b"]
    assert http.request.call_args_list[1][0] == ("DELETE", "http://cms.test/api/v1/pages/a")


def test_refresh_failure_keeps_error(api, http):
    http.request.return_value = make_response(500, {"error": "db down"})
    pages = ResourceList(api.pages)
    assert pages.refresh() == []
    assert pages.error == "db down"


def test_delete_failure_propagates(api, http):
    http.request.return_value = make_response(403, {"error": "forbidden"})
    with pytest.raises(ApiError):
        ResourceList(api.pages).delete("a")


# ── Profil ────────────────────────────────────────────────────────────────────

@pytest.fixture
def profile(api, http):
    auth = AuthSession(api)
    auth.user = {"id": "u1", "name": "Sam", "email": "sam@example.com"}
    editor = ProfileEditor(auth)
    editor.load()
    return editor


def test_profile_loads_current_user(profile):
    assert (profile.name, profile.email) == ("Sam", "sam@example.com")


def test_profile_requires_login(api):
    with pytest.raises(NotAuthenticated):
        ProfileEditor(AuthSession(api)).load()


def test_profile_short_password_rejected(profile, http):
    profile.password = profile.confirm_password = "abc"
    with pytest.raises(FormError, match="at least 6 characters"):
        profile.submit()
    http.request.assert_not_called()


def test_profile_password_mismatch_rejected(profile, http):
    profile.password, profile.confirm_password = "secret1", "secret2"
    with pytest.raises(FormError, match="Passwords do not match."):
        profile.submit()
    http.request.assert_not_called()


def test_profile_no_changes_sends_nothing(profile, http):
    assert profile.submit() is None
    http.request.assert_not_called()


def test_profile_sends_only_changed_fields_and_clears_passwords(profile, http):
    http.request.side_effect = [
        make_response(200, {"id": "u1"}),
        make_response(200, {"user": {"id": "u1", "name": "Sam", "email": "sam@example.com"}}),
    ]
    profile.password = profile.confirm_password = " secret1 "
    profile.submit()
    method, url = http.request.call_args_list[0][0]
    assert (method, url) == ("PUT", "http://cms.test/api/auth/profile")
    assert _sent_json(http, 0) == {"password": "secret1"}
    assert (profile.password, profile.confirm_password) == ("", "")


def test_profile_name_change_is_trimmed(profile, http):
    http.request.side_effect = [
        make_response(200, {}),
        make_response(200, {"user": {"id": "u1", "name": "Alex"}}),
    ]
    profile.name = "  Alex "
    profile.submit()
    assert _sent_json(http, 0) == {"name": "Alex"}
    assert profile.auth.user["name"] == "Alex"
