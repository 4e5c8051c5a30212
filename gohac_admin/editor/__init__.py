"""Éditeur de blocs : contrôleur de liste, dispatch, formulaires, Repeater."""
from .controller import BlockEditor, DIRECTIONS
from .renderer import EDITORS, UnknownBlockForm, form_for, render_block
from .repeater import Repeater
from .upload import ImageUpload
from .html import FormField

__all__ = [
    "BlockEditor", "DIRECTIONS",
    "EDITORS", "UnknownBlockForm", "form_for", "render_block",
    "Repeater", "ImageUpload", "FormField",
]
