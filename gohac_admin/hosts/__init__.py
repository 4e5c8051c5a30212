"""Formulaires hôtes (pages, articles, catégories, menus, profil) et écrans liste."""
from .slug import slugify
from .content import ContentEditor, PageEditor, PostEditor, STATUSES
from .taxonomy import CategoryEditor, MenuEditor
from .listing import ResourceList
from .profile import ProfileEditor

__all__ = [
    "slugify",
    "ContentEditor", "PageEditor", "PostEditor", "STATUSES",
    "CategoryEditor", "MenuEditor",
    "ResourceList",
    "ProfileEditor",
]
