"""Formulaire Text."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import BlockForm


class TextForm(BlockForm):
    block_type = BlockType.TEXT
    heading = "Text Block"
    FIELDS = (
        FormField("content", "Content", kind="textarea", required=True, rows=6,
                  placeholder="Enter your text content here...", help="Supports HTML and Markdown"),
        FormField("align", "Alignment", kind="select", choices=("left", "center", "right")),
    )
