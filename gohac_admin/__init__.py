"""
Gohac Admin — éditeur de blocs et client d'administration du CMS Gohac.

Usage:
    >>> from gohac_admin import BlockEditor, decode_blocks, encode_blocks
    >>> editor = BlockEditor(decode_blocks(page["blocks"]), on_change=print)
    >>> editor.add("hero")
    >>> editor.form_for(0).change("title", "Welcome")
    >>> encode_blocks(editor.blocks)
"""
from .blocks import (
    Block, BlockType, BLOCK_INFO,
    default_data_for, new_block, parse_data, patch,
    decode_blocks, encode_blocks, encode_post_content,
)
from .editor import BlockEditor, Repeater, ImageUpload, form_for, render_block
from .client import ApiClient, AuthSession
from .hosts import (
    PageEditor, PostEditor, CategoryEditor, MenuEditor, ProfileEditor, ResourceList, slugify,
)
from .theme import get_global_settings, get_menu_by_id
from .errors import (
    GohacError, UnknownBlockTypeError, FieldValueError,
    ApiError, SessionExpired, LoginError, NotAuthenticated, FormError,
)

__version__ = "0.1.0"

__all__ = [
    # blocs
    "Block", "BlockType", "BLOCK_INFO",
    "default_data_for", "new_block", "parse_data", "patch",
    "decode_blocks", "encode_blocks", "encode_post_content",
    # éditeur
    "BlockEditor", "Repeater", "ImageUpload", "form_for", "render_block",
    # client
    "ApiClient", "AuthSession",
    # hôtes
    "PageEditor", "PostEditor", "CategoryEditor", "MenuEditor", "ProfileEditor", "ResourceList", "slugify",
    # thème
    "get_global_settings", "get_menu_by_id",
    # erreurs
    "GohacError", "UnknownBlockTypeError", "FieldValueError",
    "ApiError", "SessionExpired", "LoginError", "NotAuthenticated", "FormError",
]
