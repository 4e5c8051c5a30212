"""Formulaire Hero."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import BlockForm


class HeroForm(BlockForm):
    block_type = BlockType.HERO
    heading = "Hero Block"
    FIELDS = (
        FormField("title",     "Title",    required=True, placeholder="Hero Title"),
        FormField("subtitle",  "Subtitle", placeholder="Hero Subtitle"),
        FormField("image_url", "Image",    kind="image", placeholder="https://example.com/image.jpg"),
    )
