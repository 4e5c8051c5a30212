"""
Formulaires hôtes Page / Post.

L'hôte possède la séquence canonique des blocs : chargement (décodage JSON),
BlockEditor branché en on_change pour la maintenir à jour, puis
sérialisation et envoi au submit. Pages : champ `blocks` (tableau) ;
articles : champ `content` (texte JSON, "" sans bloc).
"""
import logging
from typing import Any, Dict, List, Optional

from ..blocks.base import Block
from ..blocks.codec import blocks_to_list, decode_blocks, encode_post_content
from ..client.api import ApiClient
from ..editor.controller import BlockEditor
from ..errors import FormError
from .slug import slugify

log = logging.getLogger(__name__)

STATUSES = ("draft", "published", "archived")


class ContentEditor:
    """Base commune Page/Post : titre, slug, statut, blocs."""
    resource: str = ""
    noun: str = "content"

    def __init__(self, api: ApiClient, content_id: Optional[str] = None):
        self.api = api
        self.content_id = content_id
        self.title = ""
        self.slug = ""
        self.status = "draft"
        self.blocks: List[Block] = []
        self.block_editor = BlockEditor(on_change=self._blocks_changed, uploader=api.uploads)

    @property
    def is_edit(self) -> bool:
        return bool(self.content_id)

    def _resource(self):
        return getattr(self.api, self.resource)

    def _blocks_changed(self, blocks: List[Block]) -> None:
        self.blocks = list(blocks)

    def set_blocks(self, blocks) -> None:
        """Remplace la séquence (hôte → contrôleur, sans émission)."""
        self.blocks = list(blocks)
        self.block_editor.reset(self.blocks)

    def set_title(self, title: str) -> None:
        """Met à jour le titre ; en création, remplit le slug s'il est vide."""
        self.title = title
        if not self.is_edit and not self.slug:
            self.slug = slugify(title)

    # ── Chargement ──────────────────────────────────────────────────────────

    def load(self) -> Dict[str, Any]:
        if not self.is_edit:
            return {}
        record = self._resource().get(self.content_id) or {}
        self.title = record.get("title") or ""
        self.slug = record.get("slug") or ""
        self.status = record.get("status") or "draft"
        self.set_blocks(decode_blocks(self._raw_blocks(record)))
        self._load_extra(record)
        log.info("%s %s chargé (%d blocs)", self.noun, self.content_id, len(self.blocks))
        return record

    def _raw_blocks(self, record: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def _load_extra(self, record: Dict[str, Any]) -> None:
        pass

    # ── Envoi ───────────────────────────────────────────────────────────────

    def validate(self) -> None:
        if not self.title.strip() or not self.slug.strip():
            raise FormError("Title and slug are required.")
        if self.status not in STATUSES:
            raise FormError(f"Invalid status: {self.status}")

    def payload(self) -> Dict[str, Any]:
        raise NotImplementedError

    def submit(self) -> Dict[str, Any]:
        """Valide, sérialise et crée/met à jour. Retourne la réponse backend."""
        self.validate()
        data = self.payload()
        if self.is_edit:
            result = self._resource().update(self.content_id, data)
            log.info("%s %s mis à jour", self.noun, self.content_id)
        else:
            result = self._resource().create(data)
            if isinstance(result, dict) and result.get("id"):
                self.content_id = str(result["id"])
            log.info("%s créé : %s", self.noun, self.content_id)
        return result


class PageEditor(ContentEditor):
    resource = "pages"
    noun = "Page"

    def _raw_blocks(self, record):
        return record.get("blocks")

    def payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "slug": self.slug,
            "status": self.status,
            "blocks": blocks_to_list(self.blocks),
        }


class PostEditor(ContentEditor):
    resource = "posts"
    noun = "Post"

    def __init__(self, api: ApiClient, content_id: Optional[str] = None):
        super().__init__(api, content_id)
        self.excerpt = ""
        self.featured_image = ""
        self.category_ids: List[str] = []

    def _raw_blocks(self, record):
        return record.get("content")

    def _load_extra(self, record):
        self.excerpt = record.get("excerpt") or ""
        self.featured_image = record.get("featured_image") or ""
        if isinstance(record.get("categories"), list):
            self.category_ids = [c["id"] for c in record["categories"] if isinstance(c, dict) and c.get("id")]
        elif isinstance(record.get("category_ids"), list):
            self.category_ids = list(record["category_ids"])
        else:
            self.category_ids = []

    def payload(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "slug": self.slug,
            "status": self.status,
            "excerpt": self.excerpt,
            "featured_image": self.featured_image,
            "content": encode_post_content(self.blocks),
            "category_ids": list(self.category_ids),
        }
