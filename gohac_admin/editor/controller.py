"""
BlockEditor — contrôleur de la liste ordonnée des blocs d'une page/article.

Le formulaire hôte possède la séquence canonique ; le contrôleur en tient une
copie de travail et émet la séquence complète via on_change après chaque
mutation effective. Les no-ops (index hors limites, déplacement en bordure)
n'émettent rien.
"""
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from ..blocks.base import Block, BlockType
from ..blocks.registry import BLOCK_INFO, new_block
from .html import esc
from .renderer import form_for

log = logging.getLogger(__name__)

OnBlocksChange = Callable[[List[Block]], None]

DIRECTIONS = ("up", "down")


class BlockEditor:

    def __init__(self, initial_blocks: Optional[Iterable[Block]] = None,
                 on_change: Optional[OnBlocksChange] = None, uploader=None):
        self._blocks: List[Block] = list(initial_blocks or [])
        self.on_change = on_change
        self.uploader = uploader

    @property
    def blocks(self) -> Tuple[Block, ...]:
        return tuple(self._blocks)

    @property
    def is_empty(self) -> bool:
        return not self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._blocks)

    def _commit(self, blocks: List[Block]) -> bool:
        self._blocks = blocks
        if self.on_change is not None:
            self.on_change(list(blocks))
        return True

    # ── Mutations ───────────────────────────────────────────────────────────

    def reset(self, blocks: Iterable[Block]) -> None:
        """Réinitialisation depuis l'hôte (chargement). N'émet pas."""
        self._blocks = list(blocks)

    def add(self, block_type) -> Block:
        block = new_block(block_type)
        log.debug("Bloc ajouté : %s (%s)", block.id, block.type)
        self._commit(self._blocks + [block])
        return block

    def update(self, index: int, data: dict) -> bool:
        if not self._in_range(index):
            log.debug("update ignoré : index %s hors limites (%d blocs)", index, len(self._blocks))
            return False
        blocks = list(self._blocks)
        blocks[index] = blocks[index].with_data(data)
        return self._commit(blocks)

    def remove(self, index: int) -> bool:
        if not self._in_range(index):
            log.debug("remove ignoré : index %s hors limites (%d blocs)", index, len(self._blocks))
            return False
        return self._commit(self._blocks[:index] + self._blocks[index + 1:])

    def move(self, index: int, direction: str) -> bool:
        if direction not in DIRECTIONS:
            raise ValueError(f"direction invalide : {direction!r} (attendu {DIRECTIONS})")
        target = index - 1 if direction == "up" else index + 1
        if not self._in_range(index) or not self._in_range(target):
            return False
        blocks = list(self._blocks)
        blocks[index], blocks[target] = blocks[target], blocks[index]
        return self._commit(blocks)

    # ── Formulaires ─────────────────────────────────────────────────────────

    def index_of(self, block_id: str) -> Optional[int]:
        for i, block in enumerate(self._blocks):
            if block.id == block_id:
                return i
        return None

    def update_block(self, block_id: str, data: dict) -> bool:
        """update() ciblé par id : no-op si le bloc n'existe plus."""
        index = self.index_of(block_id)
        if index is None:
            log.debug("update ignoré : bloc %s absent", block_id)
            return False
        return self.update(index, data)

    def _live_data(self, block_id: str) -> Optional[dict]:
        index = self.index_of(block_id)
        return None if index is None else self._blocks[index].data

    def form_for(self, index: int):
        """
        Formulaire du bloc `index`. Le formulaire reste lié au bloc (par id)
        et non à la position : il suit les move/remove ultérieurs.
        """
        block_id = self._blocks[index].id
        return form_for(self._blocks[index],
                        on_change=lambda data: self.update_block(block_id, data),
                        uploader=self.uploader,
                        source=lambda: self._live_data(block_id))

    # ── Rendu ───────────────────────────────────────────────────────────────

    def _render_controls(self, index: int) -> str:
        up_disabled = " disabled" if index == 0 else ""
        down_disabled = " disabled" if index == len(self._blocks) - 1 else ""
        return (f'<div class="block-controls">'
                f'<div class="block-handle"><span class="block-number">{index + 1}</span></div>'
                f'<div class="block-actions">'
                f'<button type="button" class="block-action-button" data-action="move-up"'
                f' data-index="{index}" title="Move up"{up_disabled}>Up</button>'
                f'<button type="button" class="block-action-button" data-action="move-down"'
                f' data-index="{index}" title="Move down"{down_disabled}>Down</button>'
                f'<button type="button" class="block-action-button delete" data-action="delete"'
                f' data-index="{index}" title="Delete block">Delete</button>'
                f'</div></div>')

    def _render_add_menu(self) -> str:
        options = "".join(
            f'<button type="button" class="add-block-option" data-block-type="{bt.value}">'
            f'<span class="block-type-icon">{info.icon}</span>'
            f'<div><div class="block-type-name">{esc(info.label)}</div>'
            f'<div class="block-type-desc">{esc(info.description)}</div></div></button>'
            for bt, info in ((bt, BLOCK_INFO[bt]) for bt in BlockType)
        )
        return (f'<div class="add-block-section"><div class="add-block-dropdown">'
                f'<button type="button" class="add-block-button">Add Block</button>'
                f'<div class="add-block-menu">{options}</div></div></div>')

    def render(self) -> str:
        if self.is_empty:
            items = '<div class="empty-blocks"><p>No blocks yet. Add your first block below.</p></div>'
        else:
            items = "".join(
                f'<div class="block-wrapper" data-block-id="{esc(block.id)}">'
                f'{self._render_controls(i)}{self.form_for(i).render()}</div>'
                for i, block in enumerate(self._blocks)
            )
        return (f'<div class="block-editor-container">'
                f'<div class="blocks-list">{items}</div>{self._render_add_menu()}</div>')
