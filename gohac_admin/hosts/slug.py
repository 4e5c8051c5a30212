"""Génération de slug à partir d'un titre/nom."""
import re

_NON_WORD   = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATORS = re.compile(r"[\s_-]+")
_EDGE_DASH  = re.compile(r"^-+|-+$")


def slugify(text: str) -> str:
    """
    "Hello, World!"  → "hello-world"
    "  A_b  c-- "    → "a-b-c"
    """
    slug = (text or "").lower().strip()
    slug = _NON_WORD.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return _EDGE_DASH.sub("", slug)
