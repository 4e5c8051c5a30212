"""
Repeater — primitive générique d'édition de sous-listes.

add / remove / edit (remplacement complet de l'item, le merge partiel est à
la charge de l'appelant). Pas de réordonnancement : seuls les blocs de
premier niveau se déplacent.
"""
import logging
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from .html import esc

log = logging.getLogger(__name__)

T = TypeVar("T")


class Repeater(Generic[T]):

    def __init__(
        self,
        items: Optional[Iterable[T]],
        empty_item: Callable[[], T],
        on_change: Optional[Callable[[List[T]], None]] = None,
        render_item: Optional[Callable[[T, int], str]] = None,
        add_button_text: str = "Add Item",
        empty_message: str = "No items yet. Add your first item below.",
    ):
        self.items: List[T] = list(items or [])
        self.empty_item = empty_item
        self.on_change = on_change
        self.render_item = render_item
        self.add_button_text = add_button_text
        self.empty_message = empty_message

    def __len__(self) -> int:
        return len(self.items)

    def _emit(self, items: List[T]) -> None:
        self.items = items
        if self.on_change is not None:
            self.on_change(list(items))

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self.items)

    def add(self) -> None:
        self._emit(self.items + [self.empty_item()])

    def remove(self, index: int) -> bool:
        if not self._in_range(index):
            log.debug("Repeater.remove ignoré : index %s hors limites (%d items)", index, len(self.items))
            return False
        self._emit(self.items[:index] + self.items[index + 1:])
        return True

    def edit(self, index: int, new_item: T) -> bool:
        if not self._in_range(index):
            log.debug("Repeater.edit ignoré : index %s hors limites (%d items)", index, len(self.items))
            return False
        items = list(self.items)
        items[index] = new_item
        self._emit(items)
        return True

    def render(self) -> str:
        if not self.items:
            body = f'<div class="repeater-empty"><p>{esc(self.empty_message)}</p></div>'
        else:
            rows = []
            for index, item in enumerate(self.items):
                content = self.render_item(item, index) if self.render_item else esc(item)
                rows.append(
                    f'<div class="repeater-item">'
                    f'<div class="repeater-item-header">'
                    f'<span class="repeater-item-number">#{index + 1}</span>'
                    f'<button type="button" class="repeater-remove-button" data-index="{index}"'
                    f' title="Remove item">Remove</button></div>'
                    f'<div class="repeater-item-content">{content}</div></div>'
                )
            body = f'<div class="repeater-items">{"".join(rows)}</div>'
        return (f'<div class="repeater">{body}'
                f'<button type="button" class="repeater-add-button">{esc(self.add_button_text)}</button>'
                f'</div>')
