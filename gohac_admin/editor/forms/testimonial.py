"""Formulaire Testimonial — avatar via ImageUpload."""
from ...blocks.base import BlockType
from ...errors import FieldValueError
from ..html import FormField
from ..upload import ImageUpload
from .base import ListBlockForm


class TestimonialForm(ListBlockForm):
    block_type = BlockType.TESTIMONIAL
    heading = "Testimonial Block"
    FIELDS = (
        FormField("title",    "Title",    placeholder="What our customers say"),
        FormField("subtitle", "Subtitle", placeholder="Testimonials Section Subtitle"),
    )
    LIST_FIELD = "testimonials"
    LIST_LABEL = "Testimonials"
    ITEM_FIELDS = (
        FormField("quote",      "Quote",  kind="textarea", required=True, placeholder="Customer quote"),
        FormField("author",     "Author", required=True, placeholder="Jane Doe"),
        FormField("role",       "Role",   placeholder="CEO, Company Name"),
        FormField("avatar_url", "Avatar", kind="image", placeholder="https://example.com/avatar.jpg"),
    )
    ADD_BUTTON_TEXT = "Add Testimonial"
    EMPTY_MESSAGE = "No testimonials yet. Add your first testimonial below."

    def avatar_upload(self, index: int) -> ImageUpload:
        if self.uploader is None:
            raise FieldValueError("avatar_url", "aucun backend d'upload configuré")
        items = self.items
        current = items[index] if 0 <= index < len(items) and isinstance(items[index], dict) else {}
        return ImageUpload(self.uploader, current.get("avatar_url") or "",
                           on_change=lambda url: self.change_item(index, "avatar_url", url),
                           field="avatar_url")
