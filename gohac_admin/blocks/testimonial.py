"""Bloc Testimonial — témoignages clients."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import BlockData


class TestimonialItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    quote: str = ""
    author: str = ""
    avatar_url: Optional[str] = None
    role: Optional[str] = Field(default=None, description="ex. CEO, Company Name")


class TestimonialData(BlockData):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    testimonials: List[TestimonialItem] = Field(default_factory=list)
