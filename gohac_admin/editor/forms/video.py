"""Formulaire Video."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import BlockForm


class VideoForm(BlockForm):
    block_type = BlockType.VIDEO
    heading = "Video Block"
    FIELDS = (
        FormField("url",         "Video URL",   kind="url", required=True,
                  placeholder="https://www.youtube.com/watch?v=...", help="YouTube, Vimeo, or direct video URL"),
        FormField("title",       "Title",       placeholder="Video title"),
        FormField("description", "Description", kind="textarea", placeholder="Video description"),
        FormField("autoplay",    "Autoplay",    kind="checkbox"),
        FormField("loop",        "Loop",        kind="checkbox"),
    )
