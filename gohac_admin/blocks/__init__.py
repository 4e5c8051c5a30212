"""
Blocs — exports publics.
"""
from .base import Block, BlockData, BlockType, new_block_id, patch
from .hero import HeroData
from .text import TextData, TextAlign
from .image import ImageData
from .features import FeaturesData, FeatureItem, FeatureColumns
from .pricing import PricingData, PricingPlan
from .faq import FAQData, FAQItem
from .testimonial import TestimonialData, TestimonialItem
from .video import VideoData
from .cta import CTAData, ButtonStyle
from .registry import (
    BLOCK_DATA_MODELS, BLOCK_INFO, BlockInfo,
    default_data_for, data_model_for, new_block, parse_data, validate_block,
)
from .codec import decode_blocks, encode_blocks, encode_post_content, blocks_to_list

__all__ = [
    # Base
    "Block", "BlockData", "BlockType", "new_block_id", "patch",
    # Payloads
    "HeroData",
    "TextData", "TextAlign",
    "ImageData",
    "FeaturesData", "FeatureItem", "FeatureColumns",
    "PricingData", "PricingPlan",
    "FAQData", "FAQItem",
    "TestimonialData", "TestimonialItem",
    "VideoData",
    "CTAData", "ButtonStyle",
    # Registry
    "BLOCK_DATA_MODELS", "BLOCK_INFO", "BlockInfo",
    "default_data_for", "data_model_for", "new_block", "parse_data", "validate_block",
    # Codec
    "decode_blocks", "encode_blocks", "encode_post_content", "blocks_to_list",
]
