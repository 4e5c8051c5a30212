"""Bloc Features — grille d'atouts sur 2, 3 ou 4 colonnes."""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .base import BlockData

FeatureColumns = Literal[2, 3, 4]


class FeatureItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: str = ""
    description: Optional[str] = None
    icon: Optional[str] = Field(default=None, description="Nom d'icône ou URL")


class FeaturesData(BlockData):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    columns: Optional[FeatureColumns] = None
    items: List[FeatureItem] = Field(default_factory=list)
