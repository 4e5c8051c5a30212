"""Bloc Image — image seule avec caption optionnelle."""
from typing import Optional

from .base import BlockData


class ImageData(BlockData):
    url: str = ""
    alt: Optional[str] = None
    caption: Optional[str] = None
