"""Formulaire FAQ."""
from ...blocks.base import BlockType
from ..html import FormField
from .base import ListBlockForm


class FAQForm(ListBlockForm):
    block_type = BlockType.FAQ
    heading = "FAQ Block"
    FIELDS = (
        FormField("title", "Title", placeholder="Frequently Asked Questions"),
    )
    LIST_FIELD = "items"
    LIST_LABEL = "Questions"
    ITEM_FIELDS = (
        FormField("question", "Question", required=True, placeholder="What is your question?"),
        FormField("answer",   "Answer",   kind="textarea", required=True, placeholder="The answer"),
    )
    ADD_BUTTON_TEXT = "Add Question"
    EMPTY_MESSAGE = "No questions yet. Add your first question below."
