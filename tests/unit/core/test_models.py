# tests/unit/core/test_models.py — v2
"""Tests for core/models.py — content items, blocks, styles."""

from __future__ import annotations

import json

import pytest
from pydantic import TypeAdapter, ValidationError

from contractgen.core.models import (
    Block,
    BulletListBlock,
    BulletsItem,
    DocumentLayout,
    HeadingStack,
    ImageBlock,
    ParagraphBlock,
    Section,
    SignatureLineBlock,
    StyleConfig,
    TextItem,
    TextStyle,
    TitleBlock,
    TwoColumnBlock,
)


class TestContentItems:
    def test_section_defaults(self):
        s = Section()
        assert s.title == ""
        assert s.content == []

    def test_discriminated_content(self):
        s = Section.model_validate({
            "title": "TERMS AND CONDITIONS",
            "content": [
                {"kind": "text", "value": "First line"},
                {"kind": "bullets", "items": ["a", "b"]},
            ],
        })
        assert isinstance(s.content[0], TextItem)
        assert isinstance(s.content[1], BulletsItem)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Section.model_validate({"content": [{"kind": "table", "rows": []}]})


class TestBlocks:
    def test_defaults(self):
        assert TitleBlock(text="X").alignment == "center"
        assert ParagraphBlock(text="x").style == "paragraph"
        assert SignatureLineBlock().label == ""
        assert HeadingStack().heading is None

    def test_nested_round_trip(self):
        block = TwoColumnBlock(
            left=HeadingStack(heading="Left", children=[ParagraphBlock(text="a")]),
            right=SignatureLineBlock(label="Date"),
        )
        data = json.loads(block.model_dump_json())
        restored = TypeAdapter(Block).validate_python(data)
        assert isinstance(restored, TwoColumnBlock)
        assert isinstance(restored.left, HeadingStack)
        assert restored.left.children[0] == ParagraphBlock(text="a")

    def test_image_bytes_serialized_as_base64(self, png_bytes):
        block = ImageBlock(image_ref=png_bytes, width=150)
        data = json.loads(block.model_dump_json())
        assert isinstance(data["image_ref"], str)

    def test_image_data_uri_kept(self, png_data_uri):
        block = ImageBlock(image_ref=png_data_uri, width=200)
        assert block.image_ref == png_data_uri


class TestStyleConfig:
    def test_named_style(self):
        cfg = StyleConfig(styles={"title": TextStyle(font_size=16, bold=True)})
        assert cfg.style("title").bold is True

    def test_unknown_style_falls_back(self):
        cfg = StyleConfig(styles={}, default_font_size=11)
        style = cfg.style("caption")
        assert style.font_size == 11
        assert style.bold is False

    def test_layout_serializes(self):
        layout = DocumentLayout(
            blocks=[TitleBlock(text="OFFER LETTER"), BulletListBlock(items=["x"])],
            styles=StyleConfig(styles={}),
        )
        data = json.loads(layout.model_dump_json())
        assert [b["kind"] for b in data["blocks"]] == ["title", "bullet_list"]
        assert data["styles"]["page_margins"] == [40, 40, 40, 40]
