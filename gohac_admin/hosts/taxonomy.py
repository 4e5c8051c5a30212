"""Formulaires Catégorie et Menu."""
import logging
from typing import Any, Dict, List, Optional

from ..blocks.base import patch
from ..client.api import ApiClient
from ..editor.controller import DIRECTIONS
from ..editor.repeater import Repeater
from ..errors import FormError
from .slug import slugify

log = logging.getLogger(__name__)


class CategoryEditor:

    def __init__(self, api: ApiClient, category_id: Optional[str] = None):
        self.api = api
        self.category_id = category_id
        self.name = ""
        self.slug = ""
        self.description = ""

    @property
    def is_edit(self) -> bool:
        return bool(self.category_id)

    def set_name(self, name: str) -> None:
        self.name = name
        if not self.is_edit and name and not self.slug:
            self.slug = slugify(name)

    def load(self) -> Dict[str, Any]:
        if not self.is_edit:
            return {}
        record = self.api.categories.get(self.category_id) or {}
        self.name = record.get("name") or ""
        self.slug = record.get("slug") or ""
        self.description = record.get("description") or ""
        return record

    def submit(self) -> Dict[str, Any]:
        if not self.name.strip() or not self.slug.strip():
            raise FormError("Name and slug are required.")
        data = {"name": self.name, "slug": self.slug, "description": self.description}
        if self.is_edit:
            return self.api.categories.update(self.category_id, data)
        return self.api.categories.create(data)


class MenuEditor:
    """
    Menu : nom, description, items {label, url, target}. Les items passent
    par Repeater ; contrairement au Repeater, un menu se réordonne (move).
    """

    def __init__(self, api: ApiClient, menu_id: Optional[str] = None):
        self.api = api
        self.menu_id = menu_id
        self.name = ""
        self.description = ""
        self.items: List[Dict[str, Any]] = []

    @property
    def is_edit(self) -> bool:
        return bool(self.menu_id)

    @staticmethod
    def empty_item() -> Dict[str, Any]:
        return {"label": "", "url": "", "target": "_self"}

    def _set_items(self, items: List[Dict[str, Any]]) -> None:
        self.items = items

    def repeater(self) -> Repeater:
        return Repeater(self.items, self.empty_item, on_change=self._set_items,
                        add_button_text="Add Item",
                        empty_message='No menu items yet. Click "Add Item" to get started.')

    def add_item(self) -> None:
        self.repeater().add()

    def remove_item(self, index: int) -> bool:
        return self.repeater().remove(index)

    def change_item(self, index: int, field: str, value: str) -> bool:
        if field not in ("label", "url", "target"):
            raise FormError(f"Unknown menu item field: {field}")
        if not 0 <= index < len(self.items):
            return False
        return self.repeater().edit(index, patch(self.items[index], field, value))

    def move_item(self, index: int, direction: str) -> bool:
        if direction not in DIRECTIONS:
            raise ValueError(f"direction invalide : {direction!r} (attendu {DIRECTIONS})")
        target = index - 1 if direction == "up" else index + 1
        if not 0 <= index < len(self.items) or not 0 <= target < len(self.items):
            return False
        items = list(self.items)
        items[index], items[target] = items[target], items[index]
        self.items = items
        return True

    def load(self) -> Dict[str, Any]:
        if not self.is_edit:
            return {}
        record = self.api.menus.get(self.menu_id) or {}
        self.name = record.get("name") or ""
        self.description = record.get("description") or ""
        self.items = list(record.get("items") or [])
        return record

    def validate(self) -> None:
        if not self.name.strip():
            raise FormError("Menu name is required")
        for i, item in enumerate(self.items, 1):
            if not item.get("label") or not item.get("url"):
                raise FormError(f"Menu item {i} is missing label or URL")

    def submit(self) -> Dict[str, Any]:
        self.validate()
        data = {"name": self.name, "description": self.description, "items": self.items}
        if self.is_edit:
            return self.api.menus.update(self.menu_id, data)
        return self.api.menus.create(data)
