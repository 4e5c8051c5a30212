"""Bloc Video — YouTube, Vimeo ou fichier direct."""
from typing import Optional

from .base import BlockData


class VideoData(BlockData):
    url: str = ""
    title: Optional[str] = None
    description: Optional[str] = None
    autoplay: bool = False
    loop: bool = False
