"""Tests registry des blocs — payloads par défaut, ids, patch, vue typée."""
import re

import pytest
from pydantic import ValidationError

from gohac_admin.blocks import (
    Block, BlockType, BLOCK_DATA_MODELS, BLOCK_INFO,
    HeroData, FeaturesData, CTAData,
    default_data_for, data_model_for, new_block, new_block_id, parse_data, patch, validate_block,
)
from gohac_admin.errors import UnknownBlockTypeError


# ── Registry ──────────────────────────────────────────────────────────────────

def test_registry_covers_every_block_type():
    for bt in BlockType:
        assert bt in BLOCK_DATA_MODELS
        assert bt in BLOCK_INFO
        assert isinstance(default_data_for(bt), dict)


def test_hero_default_is_title_and_subtitle():
    assert default_data_for("hero") == {"title": "", "subtitle": ""}


def test_default_payloads():
    assert default_data_for(BlockType.TEXT) == {"content": ""}
    assert default_data_for(BlockType.IMAGE) == {"url": "", "alt": ""}
    assert default_data_for(BlockType.FEATURES)["columns"] == 3
    assert default_data_for(BlockType.CTA)["button_style"] == "primary"


def test_default_data_is_a_fresh_copy():
    first = default_data_for("faq")
    first["items"].append({"question": "Q", "answer": "A"})
    assert default_data_for("faq")["items"] == []


def test_defaults_validate_against_their_model():
    for bt in BlockType:
        data_model_for(bt).model_validate(default_data_for(bt))


def test_unknown_type_rejected():
    with pytest.raises(UnknownBlockTypeError):
        default_data_for("carousel")
    with pytest.raises(ValueError):
        new_block("gallery")


# ── Block ─────────────────────────────────────────────────────────────────────

def test_new_block_id_format():
    assert re.fullmatch(r"block-\d+-[a-z0-9]{9}", new_block_id())


def test_new_block_ids_are_unique():
    assert len({new_block("text").id for _ in range(50)}) == 50


def test_new_block_has_type_and_default_data():
    b = new_block(BlockType.PRICING)
    assert b.type == "pricing"
    assert b.block_type is BlockType.PRICING
    assert b.data == {"title": "", "subtitle": "", "plans": []}


def test_block_with_data_keeps_id_and_type():
    b = Block(id="b1", type="hero", data={"title": "A"})
    b2 = b.with_data({"title": "B"})
    assert (b2.id, b2.type, b2.data) == ("b1", "hero", {"title": "B"})
    assert b.data == {"title": "A"}


def test_unknown_block_is_not_known():
    b = Block(id="x", type="gallery", data={"images": [1, 2]})
    assert b.block_type is None
    assert not b.is_known


# ── patch ─────────────────────────────────────────────────────────────────────

def test_patch_replaces_one_key_and_keeps_siblings():
    data = {"title": "T", "subtitle": "S", "custom": 1}
    out = patch(data, "title", "New")
    assert out == {"title": "New", "subtitle": "S", "custom": 1}
    assert data["title"] == "T"


# ── Vue typée ─────────────────────────────────────────────────────────────────

def test_parse_data_returns_typed_model():
    hero = parse_data(Block(id="h", type="hero", data={"title": "Hi", "image_url": "/a.jpg"}))
    assert isinstance(hero, HeroData)
    assert hero.image_url == "/a.jpg"


def test_parse_data_keeps_extra_keys():
    cta = parse_data(Block(id="c", type="cta", data={"title": "Go", "tracking": "abc"}))
    assert isinstance(cta, CTAData)
    assert cta.model_dump()["tracking"] == "abc"


def test_parse_data_rejects_bad_columns():
    with pytest.raises(ValidationError):
        parse_data(Block(id="f", type="features", data={"columns": 5}))


def test_features_model_items():
    f = FeaturesData.model_validate({"columns": 2, "items": [{"title": "Fast"}]})
    assert f.items[0].title == "Fast"


def test_validate_block_reports_errors_but_ignores_unknown_types():
    assert validate_block(Block(id="t", type="text", data={"align": "justify"}))
    assert validate_block(Block(id="u", type="mystery", data={"align": "justify"})) == []
    assert validate_block(new_block("video")) == []
