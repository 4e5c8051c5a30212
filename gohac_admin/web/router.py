"""
Router FastAPI — éditeur de blocs côté serveur.

GET  /admin/editor/catalog  → types de blocs, libellés, payload par défaut, JSON schemas
POST /admin/editor/render   → {blocks} → HTMLResponse (éditeur complet)
POST /admin/editor/apply    → {blocks, op, …} → {blocks, changed}
POST /admin/editor/validate → {blocks} → erreurs par bloc
"""
import logging
from typing import Any, List, Literal, Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from ..blocks.base import BlockType
from ..blocks.codec import blocks_to_list, decode_blocks
from ..blocks.registry import BLOCK_DATA_MODELS, BLOCK_INFO, default_data_for, validate_block
from ..editor.controller import BlockEditor
from ..editor.renderer import form_for
from ..errors import UnknownBlockTypeError

log = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/editor", tags=["editor"])


class BlocksPayload(BaseModel):
    blocks: List[Any] = Field(default_factory=list)


class ApplyRequest(BlocksPayload):
    op: Literal["add", "update", "remove", "move"]
    index: Optional[int] = None
    type: Optional[str] = None
    direction: Optional[Literal["up", "down"]] = None
    data: Optional[dict] = None


def _require(value, name: str, op: str):
    if value is None:
        raise HTTPException(422, f"'{name}' requis pour l'opération {op}")
    return value


@router.get("/catalog", summary="Liste les blocs disponibles et leurs schemas")
def catalog() -> dict:
    return {"blocks": [
        {
            "type": bt.value,
            "label": BLOCK_INFO[bt].label,
            "description": BLOCK_INFO[bt].description,
            "icon": BLOCK_INFO[bt].icon,
            "default": default_data_for(bt),
            "schema": BLOCK_DATA_MODELS[bt].model_json_schema(),
        }
        for bt in BlockType
    ]}


@router.post("/render", response_class=HTMLResponse, summary="Rend l'éditeur pour une séquence de blocs")
def render(payload: BlocksPayload) -> HTMLResponse:
    editor = BlockEditor(decode_blocks(payload.blocks))
    return HTMLResponse(content=editor.render())


@router.post("/apply", summary="Applique une opération d'édition à une séquence de blocs")
def apply(req: ApplyRequest) -> dict:
    """
    Opération sans état : la séquence complète entre, la séquence complète
    sort. `changed` vaut false pour un no-op (index hors limites, bordure).
    """
    emitted: list = []
    editor = BlockEditor(decode_blocks(req.blocks), on_change=emitted.append)

    if req.op == "add":
        try:
            editor.add(_require(req.type, "type", req.op))
        except UnknownBlockTypeError as e:
            raise HTTPException(422, str(e))
    elif req.op == "update":
        editor.update(_require(req.index, "index", req.op), _require(req.data, "data", req.op))
    elif req.op == "remove":
        editor.remove(_require(req.index, "index", req.op))
    elif req.op == "move":
        editor.move(_require(req.index, "index", req.op), _require(req.direction, "direction", req.op))

    return {"blocks": blocks_to_list(editor.blocks), "changed": bool(emitted)}


@router.post("/validate", summary="Valide les payloads et champs requis")
def validate(payload: BlocksPayload) -> dict:
    results = []
    for block in decode_blocks(payload.blocks):
        results.append({
            "id": block.id,
            "type": block.type,
            "known": block.is_known,
            "errors": validate_block(block),
            "missing_required": form_for(block).missing_required(),
        })
    return {"valid": all(not r["errors"] for r in results), "blocks": results}
