"""Bloc FAQ — liste question/réponse."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import BlockData


class FAQItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    question: str = ""
    answer: str = ""


class FAQData(BlockData):
    title: Optional[str] = None
    items: List[FAQItem] = Field(default_factory=list)
