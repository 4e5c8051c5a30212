"""
BlockForm — base des formulaires de bloc.

Un formulaire reçoit le payload d'un bloc et un callback on_change. Chaque
modification de champ émet le payload complet fusionné (patch d'une seule
clé, les clés voisines sont conservées).
"""
import logging
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple

from ...blocks.base import BlockType, patch
from ...errors import FieldValueError
from ..html import FALSE_STRINGS, TRUE_STRINGS, FormField, esc, render_field
from ..repeater import Repeater
from ..upload import ImageUpload

log = logging.getLogger(__name__)

OnChange = Callable[[Dict[str, Any]], None]


def coerce_value(field: FormField, value: Any) -> Any:
    """Valide/convertit une valeur de formulaire selon son descripteur."""
    if field.kind == "checkbox":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in TRUE_STRINGS | FALSE_STRINGS:
            return value.lower() in TRUE_STRINGS
        raise FieldValueError(field.name, f"booléen attendu, reçu {value!r}")

    if field.kind == "select":
        for choice in field.choices:
            if value == choice or (isinstance(value, str) and value == str(choice)):
                return choice
        raise FieldValueError(field.name, f"{value!r} hors choix {list(field.choices)}")

    if value is None:
        return ""
    if not isinstance(value, str):
        raise FieldValueError(field.name, f"texte attendu, reçu {type(value).__name__}")
    return value


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class BlockForm:
    block_type: ClassVar[Optional[BlockType]] = None
    heading: ClassVar[str] = ""
    FIELDS: ClassVar[Tuple[FormField, ...]] = ()

    def __init__(self, data: Optional[Dict[str, Any]] = None,
                 on_change: Optional[OnChange] = None,
                 uploader=None, id_prefix: str = "",
                 source: Optional[Callable[[], Optional[Dict[str, Any]]]] = None):
        self._data: Dict[str, Any] = dict(data or {})
        self.on_change = on_change
        self.uploader = uploader
        self.source = source
        self.id_prefix = id_prefix or (self.block_type.value if self.block_type else "block")

    @property
    def data(self) -> Dict[str, Any]:
        """Payload courant ; relu depuis `source` (bloc vivant) quand il est fourni."""
        if self.source is not None:
            live = self.source()
            if live is not None:
                self._data = dict(live)
        return self._data

    @data.setter
    def data(self, value: Dict[str, Any]) -> None:
        self._data = value

    # ── Champs ──────────────────────────────────────────────────────────────

    def field(self, name: str) -> FormField:
        for f in self.FIELDS:
            if f.name == name:
                return f
        raise FieldValueError(name, f"champ inconnu pour {self.heading or type(self).__name__}")

    def _emit(self, data: Dict[str, Any]) -> None:
        self.data = data
        if self.on_change is not None:
            self.on_change(data)

    def _set(self, name: str, value: Any) -> None:
        self._emit(patch(self.data, name, value))

    def change(self, name: str, value: Any) -> None:
        """Modifie un champ et émet le payload fusionné."""
        value = coerce_value(self.field(name), value)
        log.debug("%s.%s ← %r", self.id_prefix, name, value)
        self._set(name, value)

    def missing_required(self) -> List[str]:
        return [f.name for f in self.FIELDS if f.required and is_empty(self.data.get(f.name))]

    def image_upload(self, name: str) -> ImageUpload:
        """ImageUpload lié au champ image `name`."""
        f = self.field(name)
        if f.kind != "image":
            raise FieldValueError(name, "pas un champ image")
        if self.uploader is None:
            raise FieldValueError(name, "aucun backend d'upload configuré")
        return ImageUpload(self.uploader, self.data.get(name) or "",
                           on_change=lambda url: self.change(name, url), field=name)

    # ── Rendu ───────────────────────────────────────────────────────────────

    def dom_id(self, name: str) -> str:
        return f"{self.id_prefix}-{name}"

    def render_fields(self) -> str:
        return "".join(
            render_field(f, self.data.get(f.name), self.dom_id(f.name))
            for f in self.FIELDS
        )

    def render_extra(self) -> str:
        return ""

    def render(self) -> str:
        data_type = f' data-block-type="{self.block_type.value}"' if self.block_type else ""
        return (f'<div class="block-editor"{data_type}>'
                f'<div class="block-header"><h3>{esc(self.heading)}</h3></div>'
                f'<div class="block-content">{self.render_fields()}{self.render_extra()}</div>'
                f'</div>')


class ListBlockForm(BlockForm):
    """
    Formulaire avec une sous-liste (items, plans, testimonials) éditée via
    Repeater. Les items sont des dicts JSON ; change_item fusionne un champ
    puis remplace l'item entier via Repeater.edit.
    """
    LIST_FIELD: ClassVar[str] = "items"
    LIST_LABEL: ClassVar[str] = "Items"
    ITEM_FIELDS: ClassVar[Tuple[FormField, ...]] = ()
    ADD_BUTTON_TEXT: ClassVar[str] = "Add Item"
    EMPTY_MESSAGE: ClassVar[str] = "No items yet. Add your first item below."

    @classmethod
    def empty_item(cls) -> Dict[str, Any]:
        return {f.name: ("" if f.kind != "checkbox" else False) for f in cls.ITEM_FIELDS}

    @property
    def items(self) -> List[Any]:
        items = self.data.get(self.LIST_FIELD)
        return list(items) if isinstance(items, list) else []

    def item_field(self, name: str) -> FormField:
        for f in self.ITEM_FIELDS:
            if f.name == name:
                return f
        raise FieldValueError(name, f"champ d'item inconnu pour {self.heading}")

    def repeater(self) -> Repeater:
        return Repeater(
            self.items,
            empty_item=self.empty_item,
            on_change=lambda items: self._set(self.LIST_FIELD, items),
            render_item=self.render_item,
            add_button_text=self.ADD_BUTTON_TEXT,
            empty_message=self.EMPTY_MESSAGE,
        )

    def add_item(self) -> None:
        self.repeater().add()

    def remove_item(self, index: int) -> bool:
        return self.repeater().remove(index)

    def change_item(self, index: int, name: str, value: Any) -> bool:
        value = coerce_value(self.item_field(name), value)
        items = self.items
        if not 0 <= index < len(items):
            log.debug("%s.change_item ignoré : index %s hors limites", self.id_prefix, index)
            return False
        current = items[index] if isinstance(items[index], dict) else {}
        return self.repeater().edit(index, patch(current, name, value))

    def item_dom_id(self, index: int, name: str) -> str:
        return f"{self.id_prefix}-{self.LIST_FIELD}-{index}-{name}"

    def render_item(self, item: Any, index: int) -> str:
        item = item if isinstance(item, dict) else {}
        return "".join(
            render_field(f, item.get(f.name), self.item_dom_id(index, f.name),
                         name=f"{self.LIST_FIELD}[{index}][{f.name}]")
            for f in self.ITEM_FIELDS
        )

    def render_extra(self) -> str:
        return (f'<div class="form-group"><label>{esc(self.LIST_LABEL)}</label>'
                f'{self.repeater().render()}</div>')
