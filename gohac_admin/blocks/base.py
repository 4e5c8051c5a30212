"""
Blocs — enum des types, enveloppe Block et base des payloads.

Un Block persisté a la forme {id, type, data}. `type` reste une chaîne libre
pour qu'un tag inconnu traverse une session d'édition sans être modifié ;
`data` reste le dict JSON brut, la vue typée passe par parse_data().
"""
import random
import string
import time
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    HERO        = "hero"
    TEXT        = "text"
    IMAGE       = "image"
    FEATURES    = "features"
    PRICING     = "pricing"
    FAQ         = "faq"
    TESTIMONIAL = "testimonial"
    VIDEO       = "video"
    CTA         = "cta"

    @classmethod
    def lookup(cls, value) -> Optional["BlockType"]:
        """BlockType correspondant à `value`, None si le tag est inconnu."""
        try:
            return cls(value)
        except ValueError:
            return None


class BlockData(BaseModel):
    """Base des payloads typés. Les clés inconnues sont conservées."""
    model_config = ConfigDict(extra="allow")


class Block(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str
    data: Dict[str, Any] = Field(default_factory=dict)

    @property
    def block_type(self) -> Optional[BlockType]:
        return BlockType.lookup(self.type)

    @property
    def is_known(self) -> bool:
        return self.block_type is not None

    def with_data(self, data: Dict[str, Any]) -> "Block":
        """Nouveau Block, même id/type, payload remplacé."""
        return self.model_copy(update={"data": dict(data)})


_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_block_id() -> str:
    """Id client : block-<timestamp ms>-<9 caractères base36>."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"block-{int(time.time() * 1000)}-{suffix}"


def patch(data: Dict[str, Any], field: str, value: Any) -> Dict[str, Any]:
    """Copie de `data` avec une seule clé remplacée (jamais de remplacement global)."""
    return {**data, field: value}
