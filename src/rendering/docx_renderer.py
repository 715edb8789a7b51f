# src/rendering/docx_renderer.py — v1
"""Word document renderer using python-docx.

Requires the 'python-docx' package. Margins are given in points, in
(left, top, right, bottom) order; a style's top/bottom margins become the
paragraph's space before/after.
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import Any

from contractgen.core.models import (
    Block,
    BulletListBlock,
    DocumentLayout,
    FieldValue,
    HeadingStack,
    ImageBlock,
    ParagraphBlock,
    SignatureLineBlock,
    StyleConfig,
    TitleBlock,
    TwoColumnBlock,
)
from contractgen.rendering.base_renderer import BaseRenderer, RenderError

logger = logging.getLogger(__name__)

SIGNATURE_RULE = "_" * 20
BLANK_SIGNATURE_SPACE = 40


class DocxRenderer(BaseRenderer):
    """Render layouts to .docx bytes."""

    @property
    def extension(self) -> str:
        return "docx"

    @property
    def media_type(self) -> str:
        return "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def render(self, layout: DocumentLayout) -> bytes:
        try:
            import docx
        except ImportError as e:
            raise ImportError(
                "python-docx package required for DOCX rendering: "
                "pip install python-docx"
            ) from e

        document = docx.Document()
        self._apply_page_margins(document, layout.styles)

        for block in layout.blocks:
            self._render_block(document, block, layout.styles)

        buffer = io.BytesIO()
        document.save(buffer)
        logger.debug("Rendered %d blocks to DOCX", len(layout.blocks))
        return buffer.getvalue()

    # --- Blocks ---

    def _render_block(self, container: Any, block: Block, styles: StyleConfig) -> None:
        if isinstance(block, TitleBlock):
            self._add_text(container, block.text, styles, block.style, block.alignment)
        elif isinstance(block, ParagraphBlock):
            self._add_text(container, block.text, styles, block.style, block.alignment)
        elif isinstance(block, BulletListBlock):
            for item in block.items:
                paragraph = container.add_paragraph(style="List Bullet")
                self._styled_run(paragraph, item, styles, "paragraph")
        elif isinstance(block, HeadingStack):
            if block.heading:
                self._add_text(
                    container, block.heading, styles, block.heading_style, block.alignment
                )
            for child in block.children:
                self._render_block(container, child, styles)
        elif isinstance(block, ImageBlock):
            self._add_image(container, block)
        elif isinstance(block, TwoColumnBlock):
            table = container.add_table(rows=1, cols=2)
            self._render_block(table.cell(0, 0), block.left, styles)
            self._render_block(table.cell(0, 1), block.right, styles)
        elif isinstance(block, SignatureLineBlock):
            self._add_signature_line(container, block, styles)
        else:
            raise RenderError(f"Unsupported block kind: {type(block).__name__}")

    def _add_text(
        self,
        container: Any,
        text: str,
        styles: StyleConfig,
        style_name: str,
        alignment: str,
    ) -> Any:
        paragraph = container.add_paragraph()
        paragraph.alignment = _alignment(alignment)
        style = styles.style(style_name)
        fmt = paragraph.paragraph_format
        fmt.space_before = _pt(style.margin[1])
        fmt.space_after = _pt(style.margin[3])
        self._styled_run(paragraph, text, styles, style_name)
        return paragraph

    @staticmethod
    def _styled_run(paragraph: Any, text: str, styles: StyleConfig, style_name: str) -> None:
        style = styles.style(style_name)
        run = paragraph.add_run(text)
        run.font.size = _pt(style.font_size)
        run.bold = style.bold

    def _add_signature_line(
        self, container: Any, block: SignatureLineBlock, styles: StyleConfig
    ) -> None:
        if not block.label:
            paragraph = container.add_paragraph()
            paragraph.paragraph_format.space_before = _pt(BLANK_SIGNATURE_SPACE)
            return
        self._add_text(
            container,
            f"{block.label}: {SIGNATURE_RULE}",
            styles,
            "paragraph",
            block.alignment,
        )

    def _add_image(self, container: Any, block: ImageBlock) -> None:
        data = decode_image_ref(block.image_ref)
        paragraph = container.add_paragraph()
        paragraph.alignment = _alignment(block.alignment)
        try:
            paragraph.add_run().add_picture(io.BytesIO(data), width=_pt(block.width))
        except Exception as e:
            raise RenderError(f"Unreadable image data: {e}") from e

    @staticmethod
    def _apply_page_margins(document: Any, styles: StyleConfig) -> None:
        left, top, right, bottom = styles.page_margins
        for section in document.sections:
            section.left_margin = _pt(left)
            section.top_margin = _pt(top)
            section.right_margin = _pt(right)
            section.bottom_margin = _pt(bottom)


def decode_image_ref(image_ref: FieldValue) -> bytes:
    """Return raw image bytes from bytes or a base64 ``data:`` URI.

    Raises:
        RenderError: If the reference is not decodable.
    """
    if isinstance(image_ref, bytes):
        return image_ref
    if image_ref.startswith("data:") and "," in image_ref:
        _, payload = image_ref.split(",", 1)
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise RenderError(f"Invalid base64 image data: {e}") from e
    raise RenderError("Unsupported image reference (expected bytes or data URI)")


def _pt(value: float) -> Any:
    from docx.shared import Pt

    return Pt(value)


def _alignment(value: str) -> Any:
    from docx.enum.text import WD_ALIGN_PARAGRAPH

    return {
        "left": WD_ALIGN_PARAGRAPH.LEFT,
        "center": WD_ALIGN_PARAGRAPH.CENTER,
        "right": WD_ALIGN_PARAGRAPH.RIGHT,
    }[value]
