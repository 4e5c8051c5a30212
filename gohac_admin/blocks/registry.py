"""
Registry des blocs — modèles de payload, payloads par défaut, libellés.

Les trois tables sont indexées par BlockType et vérifiées exhaustives à
l'import : ajouter un type à l'enum sans compléter les tables fait échouer
l'import du package.
"""
import copy
from typing import Any, Dict, NamedTuple, Type

from pydantic import ValidationError

from ..errors import UnknownBlockTypeError
from .base import Block, BlockData, BlockType, new_block_id
from .cta import CTAData
from .faq import FAQData
from .features import FeaturesData
from .hero import HeroData
from .image import ImageData
from .pricing import PricingData
from .testimonial import TestimonialData
from .text import TextData
from .video import VideoData


class BlockInfo(NamedTuple):
    label: str
    description: str
    icon: str


BLOCK_DATA_MODELS: Dict[BlockType, Type[BlockData]] = {
    BlockType.HERO:        HeroData,
    BlockType.TEXT:        TextData,
    BlockType.IMAGE:       ImageData,
    BlockType.FEATURES:    FeaturesData,
    BlockType.PRICING:     PricingData,
    BlockType.FAQ:         FAQData,
    BlockType.TESTIMONIAL: TestimonialData,
    BlockType.VIDEO:       VideoData,
    BlockType.CTA:         CTAData,
}

_DEFAULT_DATA: Dict[BlockType, Dict[str, Any]] = {
    BlockType.HERO:        {"title": "", "subtitle": ""},
    BlockType.TEXT:        {"content": ""},
    BlockType.IMAGE:       {"url": "", "alt": ""},
    BlockType.FEATURES:    {"title": "", "subtitle": "", "columns": 3, "items": []},
    BlockType.PRICING:     {"title": "", "subtitle": "", "plans": []},
    BlockType.FAQ:         {"title": "", "items": []},
    BlockType.TESTIMONIAL: {"title": "", "subtitle": "", "testimonials": []},
    BlockType.VIDEO:       {"url": "", "title": "", "description": "", "autoplay": False, "loop": False},
    BlockType.CTA:         {"title": "", "subtitle": "", "button_text": "", "button_url": "",
                            "button_style": "primary"},
}

BLOCK_INFO: Dict[BlockType, BlockInfo] = {
    BlockType.HERO:        BlockInfo("Hero",            "Title and subtitle",          "🎯"),
    BlockType.TEXT:        BlockInfo("Text",            "Rich text content",           "📝"),
    BlockType.IMAGE:       BlockInfo("Image",           "Image with caption",          "🖼️"),
    BlockType.FEATURES:    BlockInfo("Features",        "Grid of feature items",       "✨"),
    BlockType.PRICING:     BlockInfo("Pricing",         "Pricing plans",               "💰"),
    BlockType.FAQ:         BlockInfo("FAQ",             "Questions and answers",       "❓"),
    BlockType.TESTIMONIAL: BlockInfo("Testimonials",    "Customer quotes",             "💬"),
    BlockType.VIDEO:       BlockInfo("Video",           "Embedded video",              "🎬"),
    BlockType.CTA:         BlockInfo("Call to Action",  "Title with a button",         "📣"),
}


def _check_exhaustive(table: dict, name: str) -> None:
    missing = [t.value for t in BlockType if t not in table]
    if missing:
        raise RuntimeError(f"{name} incomplet — types manquants : {missing}")


for _table, _name in ((BLOCK_DATA_MODELS, "BLOCK_DATA_MODELS"),
                      (_DEFAULT_DATA, "_DEFAULT_DATA"),
                      (BLOCK_INFO, "BLOCK_INFO")):
    _check_exhaustive(_table, _name)


def _require_type(block_type) -> BlockType:
    bt = BlockType.lookup(block_type)
    if bt is None:
        raise UnknownBlockTypeError(block_type)
    return bt


def default_data_for(block_type) -> Dict[str, Any]:
    """Payload vide d'un type (copie neuve à chaque appel)."""
    return copy.deepcopy(_DEFAULT_DATA[_require_type(block_type)])


def data_model_for(block_type) -> Type[BlockData]:
    return BLOCK_DATA_MODELS[_require_type(block_type)]


def new_block(block_type) -> Block:
    """Bloc neuf : id frais + payload par défaut."""
    bt = _require_type(block_type)
    return Block(id=new_block_id(), type=bt.value, data=default_data_for(bt))


def parse_data(block: Block) -> BlockData:
    """
    Vue typée du payload d'un bloc.

    Lève UnknownBlockTypeError pour un tag hors enum, ValidationError si le
    payload ne correspond pas au type.
    """
    return data_model_for(block.type).model_validate(block.data)


def validate_block(block: Block) -> list:
    """Erreurs pydantic du payload (liste vide si valide ou type inconnu)."""
    if not block.is_known:
        return []
    try:
        parse_data(block)
    except ValidationError as e:
        return e.errors(include_url=False)
    return []
