"""Formulaire Image."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import BlockForm


class ImageForm(BlockForm):
    block_type = BlockType.IMAGE
    heading = "Image Block"
    FIELDS = (
        FormField("url",     "Image",    kind="image", required=True, placeholder="https://example.com/image.jpg"),
        FormField("alt",     "Alt Text", placeholder="Descriptive alt text"),
        FormField("caption", "Caption",  placeholder="Image caption"),
    )
