"""Bloc Hero — titre, sous-titre, image de fond."""
from typing import Optional

from .base import BlockData


class HeroData(BlockData):
    title: str = ""
    subtitle: Optional[str] = None
    image_url: Optional[str] = None
