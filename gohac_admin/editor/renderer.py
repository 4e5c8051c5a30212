"""
Dispatch bloc → formulaire d'édition.

EDITORS couvre exactement BlockType (vérifié à l'import, comme le registry
des payloads). Un tag inconnu donne un UnknownBlockForm : placeholder
visible, jamais d'émission, le bloc traverse la session intact.
"""
import logging
from typing import Dict, Optional, Type, Union

from ..blocks.base import Block, BlockType
from .forms import (
    BlockForm, HeroForm, TextForm, ImageForm, FeaturesForm, PricingForm,
    FAQForm, TestimonialForm, VideoForm, CTAForm,
)
from .forms.base import OnChange
from .html import esc

log = logging.getLogger(__name__)

EDITORS: Dict[BlockType, Type[BlockForm]] = {
    BlockType.HERO:        HeroForm,
    BlockType.TEXT:        TextForm,
    BlockType.IMAGE:       ImageForm,
    BlockType.FEATURES:    FeaturesForm,
    BlockType.PRICING:     PricingForm,
    BlockType.FAQ:         FAQForm,
    BlockType.TESTIMONIAL: TestimonialForm,
    BlockType.VIDEO:       VideoForm,
    BlockType.CTA:         CTAForm,
}

_missing = [t.value for t in BlockType if t not in EDITORS]
if _missing:
    raise RuntimeError(f"EDITORS incomplet — types manquants : {_missing}")


class UnknownBlockForm:
    """Placeholder non éditable pour un type de bloc non reconnu."""

    def __init__(self, block: Block):
        self.block = block
        self.data = dict(block.data)

    def missing_required(self) -> list:
        return []

    def render(self) -> str:
        return (f'<div class="block-editor block-editor--unknown" data-block-type="{esc(self.block.type)}">'
                f'<div class="block-header"><h3>Unknown Block Type: {esc(self.block.type)}</h3></div>'
                f'</div>')


def form_for(block: Block, on_change: Optional[OnChange] = None,
             uploader=None, source=None) -> Union[BlockForm, UnknownBlockForm]:
    """Formulaire correspondant au type du bloc."""
    bt = block.block_type
    if bt is None:
        log.warning("Type de bloc inconnu %r (bloc %s) — rendu en lecture seule", block.type, block.id)
        return UnknownBlockForm(block)
    return EDITORS[bt](block.data, on_change=on_change, uploader=uploader,
                       id_prefix=block.id, source=source)


def render_block(block: Block, uploader=None) -> str:
    return form_for(block, uploader=uploader).render()
