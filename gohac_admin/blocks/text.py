"""Bloc Text — contenu HTML ou Markdown."""
from typing import Literal, Optional

from pydantic import Field

from .base import BlockData

TextAlign = Literal["left", "center", "right"]


class TextData(BlockData):
    content: str = Field(default="", description="HTML ou Markdown")
    align: Optional[TextAlign] = None
