"""Formulaire Features — items via Repeater, colonnes 2/3/4."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import ListBlockForm


class FeaturesForm(ListBlockForm):
    block_type = BlockType.FEATURES
    heading = "Features Block"
    FIELDS = (
        FormField("title",    "Title",    placeholder="Features Section Title"),
        FormField("subtitle", "Subtitle", placeholder="Features Section Subtitle"),
        FormField("columns",  "Columns",  kind="select", choices=(2, 3, 4)),
    )
    LIST_FIELD = "items"
    LIST_LABEL = "Features"
    ITEM_FIELDS = (
        FormField("title",       "Title",       required=True, placeholder="Feature title"),
        FormField("description", "Description", kind="textarea", rows=2, placeholder="Feature description"),
        FormField("icon",        "Icon",        placeholder="Icon name or URL"),
    )
    ADD_BUTTON_TEXT = "Add Feature"
    EMPTY_MESSAGE = "No features yet. Add your first feature below."
