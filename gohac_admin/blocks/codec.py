"""
Codec JSON — frontière de persistance des séquences de blocs.

Pages : champ `blocks` (tableau JSON). Articles : champ `content` (texte JSON,
chaîne vide quand il n'y a aucun bloc).

Normalisation au décodage : un `type` non textuel est converti en chaîne
(7 → "7", absent → ""), avec un avertissement. Ces blocs deviennent des
blocs de type inconnu ; ils ne ressortent pas octet pour octet à l'encodage.
"""
import json
import logging
from typing import Any, Iterable, List, Union

from .base import Block, new_block_id

log = logging.getLogger(__name__)


def _coerce_entry(entry: Any, position: int) -> Union[Block, None]:
    if not isinstance(entry, dict):
        log.warning("Bloc #%d ignoré : objet attendu, reçu %s", position, type(entry).__name__)
        return None

    raw = dict(entry)
    block_id = raw.pop("id", None)
    block_type = raw.pop("type", None)
    data = raw.pop("data", None)

    if not isinstance(block_id, str) or not block_id:
        block_id = new_block_id()
    if not isinstance(data, dict):
        if data is not None:
            log.warning("Bloc %s : data invalide (%s) remplacé par {}", block_id, type(data).__name__)
        data = {}
    if not isinstance(block_type, str):
        normalized = "" if block_type is None else str(block_type)
        log.warning("Bloc %s : type %r normalisé en %r", block_id, block_type, normalized)
        block_type = normalized

    return Block(id=block_id, type=block_type, data=data, **raw)


def decode_blocks(raw: Any) -> List[Block]:
    """
    JSON (texte ou déjà décodé) → liste de Block.

    Tolère l'absence d'id (généré) et un data manquant ou non-objet ({}).
    Un JSON illisible ou une racine qui n'est pas un tableau donne [].
    """
    if raw is None or raw == "":
        return []

    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            log.error("Failed to parse content blocks: %s", e)
            return []

    if not isinstance(raw, list):
        log.error("Failed to parse content blocks: tableau attendu, reçu %s", type(raw).__name__)
        return []

    blocks = []
    for i, entry in enumerate(raw):
        block = _coerce_entry(entry, i)
        if block is not None:
            blocks.append(block)
    return blocks


def blocks_to_list(blocks: Iterable[Block]) -> List[dict]:
    return [b.model_dump() for b in blocks]


def encode_blocks(blocks: Iterable[Block]) -> str:
    return json.dumps(blocks_to_list(blocks), ensure_ascii=False)


def encode_post_content(blocks: Iterable[Block]) -> str:
    """Champ `content` d'un article : "" si aucun bloc."""
    blocks = list(blocks)
    return encode_blocks(blocks) if blocks else ""
