"""Bloc Pricing — grille de plans tarifaires."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import BlockData


class PricingPlan(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    price: str = Field(default="", description="ex. $99/month")
    description: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    button_text: Optional[str] = None
    button_url: Optional[str] = None
    highlighted: bool = False


class PricingData(BlockData):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    plans: List[PricingPlan] = Field(default_factory=list)
