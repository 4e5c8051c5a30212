"""Formulaire Call to Action."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import BlockForm


class CTAForm(BlockForm):
    block_type = BlockType.CTA
    heading = "Call to Action Block"
    FIELDS = (
        FormField("title",        "Title",        required=True, placeholder="Ready to get started?"),
        FormField("subtitle",     "Subtitle",     placeholder="Join thousands of happy customers"),
        FormField("button_text",  "Button Text",  required=True, placeholder="Get Started"),
        FormField("button_url",   "Button URL",   kind="url", required=True, placeholder="https://example.com/signup"),
        FormField("button_style", "Button Style", kind="select", choices=("primary", "secondary", "outline")),
        FormField("background",   "Background",   placeholder="#667eea or linear-gradient(...)"),
    )
