# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
Content items and blocks are closed unions discriminated by ``kind``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# Caller-supplied form values: plain text, data URIs or raw image bytes.
FieldValue = Union[str, bytes]
FieldRecord = Mapping[str, FieldValue]

Alignment = Literal["left", "center", "right"]
StyleName = Literal["title", "heading", "subheading", "paragraph", "small"]


# === SEGMENTATION ===


class TextItem(BaseModel):
    """A single plain line of body text."""

    kind: Literal["text"] = "text"
    value: str


class BulletsItem(BaseModel):
    """A contiguous run of bullet lines, markers stripped."""

    kind: Literal["bullets"] = "bullets"
    items: list[str]


ContentItem = Annotated[Union[TextItem, BulletsItem], Field(discriminator="kind")]


class Section(BaseModel):
    """Titled run of content. An empty title marks leading untitled content."""

    title: str = ""
    content: list[ContentItem] = Field(default_factory=list)


class NormalizedText(BaseModel):
    """Output of the markup normalizer."""

    text: str
    date: str | None = None
    location: str | None = None
    fault: str | None = None


# === LAYOUT BLOCKS ===


class TitleBlock(BaseModel):
    kind: Literal["title"] = "title"
    text: str
    style: StyleName = "title"
    alignment: Alignment = "center"


class ParagraphBlock(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    text: str
    style: StyleName = "paragraph"
    alignment: Alignment = "left"


class BulletListBlock(BaseModel):
    kind: Literal["bullet_list"] = "bullet_list"
    items: list[str]


class ImageBlock(BaseModel):
    """Opaque image reference; decoding is the renderer's job."""

    model_config = ConfigDict(ser_json_bytes="base64")

    kind: Literal["image"] = "image"
    image_ref: FieldValue
    width: int
    alignment: Alignment = "center"


class SignatureLineBlock(BaseModel):
    """A blank line to sign on. An empty label is plain signing space."""

    kind: Literal["signature_line"] = "signature_line"
    label: str = ""
    alignment: Alignment = "center"


class HeadingStack(BaseModel):
    """Heading followed by its child blocks. ``heading=None`` omits the heading."""

    kind: Literal["heading_stack"] = "heading_stack"
    heading: str | None = None
    heading_style: StyleName = "heading"
    alignment: Alignment = "left"
    children: list[Block] = Field(default_factory=list)


class TwoColumnBlock(BaseModel):
    kind: Literal["two_column"] = "two_column"
    left: Block
    right: Block


Block = Annotated[
    Union[
        TitleBlock,
        HeadingStack,
        ParagraphBlock,
        BulletListBlock,
        ImageBlock,
        TwoColumnBlock,
        SignatureLineBlock,
    ],
    Field(discriminator="kind"),
]

HeadingStack.model_rebuild()
TwoColumnBlock.model_rebuild()


class TextStyle(BaseModel):
    """Font contract for one named style. Margins are (left, top, right, bottom) in points."""

    font_size: float
    bold: bool = False
    margin: tuple[float, float, float, float] = (0, 0, 0, 0)


class StyleConfig(BaseModel):
    """Style configuration handed to the renderer with the block tree."""

    styles: dict[str, TextStyle]
    default_font_size: float = 10
    page_margins: tuple[float, float, float, float] = (40, 40, 40, 40)

    def style(self, name: str) -> TextStyle:
        """Return the named style, falling back to the default font size."""
        return self.styles.get(name) or TextStyle(font_size=self.default_font_size)


class DocumentLayout(BaseModel):
    """Renderable document: ordered blocks, top to bottom, plus styles."""

    blocks: list[Block]
    styles: StyleConfig
