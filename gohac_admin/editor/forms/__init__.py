"""Formulaires d'édition, un par type de bloc."""
from .base import BlockForm, ListBlockForm, coerce_value
from .hero import HeroForm
from .text import TextForm
from .image import ImageForm
from .features import FeaturesForm
from .pricing import PricingForm
from .faq import FAQForm
from .testimonial import TestimonialForm
from .video import VideoForm
from .cta import CTAForm

__all__ = [
    "BlockForm", "ListBlockForm", "coerce_value",
    "HeroForm", "TextForm", "ImageForm", "FeaturesForm", "PricingForm",
    "FAQForm", "TestimonialForm", "VideoForm", "CTAForm",
]
