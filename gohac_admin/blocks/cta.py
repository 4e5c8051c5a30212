"""Bloc CTA — call-to-action avec bouton."""
from typing import Literal, Optional

from pydantic import Field

from .base import BlockData

ButtonStyle = Literal["primary", "secondary", "outline"]


class CTAData(BlockData):
    title: str = ""
    subtitle: Optional[str] = None
    button_text: str = ""
    button_url: str = ""
    button_style: Optional[ButtonStyle] = None
    background: Optional[str] = Field(default=None, description="Couleur ou gradient")
