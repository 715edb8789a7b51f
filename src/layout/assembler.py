# src/layout/assembler.py — v1
"""Assemble segmented sections and form fields into renderable blocks.

Processing order:
  1. Placeholder substitution (date tokens, signature/logo image tokens)
  2. Optional logo image
  3. Optional date/location header row
  4. Document title
  5. Signature suppression: the first signature-looking line and everything
     after it is dropped
  6. One heading stack per section, with colon-terminated lines regrouped
     into nested sub-heading stacks
  7. Synthesized signature area for the document type
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from contractgen.config.document_types import (
    LOGO_IMAGE,
    DocumentType,
    parse_document_type,
)
from contractgen.core.models import (
    Block,
    BulletListBlock,
    BulletsItem,
    ContentItem,
    FieldRecord,
    HeadingStack,
    ImageBlock,
    ParagraphBlock,
    Section,
    TextItem,
    TitleBlock,
    TwoColumnBlock,
)
from contractgen.extraction.section_segmenter import is_bullet
from contractgen.layout.signature_blocks import (
    DEFAULT_SIGNATURE_WIDTH,
    build_signature_blocks,
)

logger = logging.getLogger(__name__)

DEFAULT_LOGO_WIDTH = 200

DATE_PLACEHOLDERS = ("[Date]", "[Current Date]")
IMAGE_PLACEHOLDERS = (
    "[OWNER_SIGNATURE]",
    "[TENANT_SIGNATURE]",
    "[SIGNATURE_IMAGE]",
    "[LOGO_IMAGE]",
)
SIGNATURE_MARKER = "SIGNATURE"
SIGNATURE_LINE_PREFIXES = ("Owner:", "Tenant:", "Witness:")


def assemble(
    sections: Sequence[Section],
    fields: FieldRecord,
    document_type: DocumentType | str,
    extracted_date: str | None,
    extracted_location: str | None,
    render_date: str,
    *,
    logo_width: int = DEFAULT_LOGO_WIDTH,
    signature_width: int = DEFAULT_SIGNATURE_WIDTH,
    include_witness: bool = False,
) -> list[Block]:
    """Build the ordered block list for one document.

    Args:
        sections: Segmenter output, in reading order.
        fields: Caller field record (names, addresses, images).
        document_type: Catalog type; selects the signature area.
        extracted_date: Date recovered from generator markup, if any.
        extracted_location: Location recovered from generator markup, if any.
        render_date: Date string substituted for date placeholders.
        logo_width: Nominal logo width in points.
        signature_width: Nominal signature image width in points.
        include_witness: Append witness lines to rental signatures.

    Returns:
        Blocks, top to bottom.

    Raises:
        UnknownDocumentTypeError: If ``document_type`` is outside the catalog.
    """
    doc_type = parse_document_type(document_type)

    substituted = substitute_placeholders(sections, render_date)
    retained = suppress_signature_lines(substituted)
    logger.debug(
        "Assembling %s: %d sections, %d retained",
        doc_type.value, len(sections), len(retained),
    )

    blocks: list[Block] = []

    logo = fields.get(LOGO_IMAGE)
    if logo:
        blocks.append(ImageBlock(image_ref=logo, width=logo_width))

    if extracted_date or extracted_location:
        blocks.append(_header_row(extracted_date, extracted_location))

    blocks.append(TitleBlock(text=doc_type.value.upper()))
    blocks.extend(section_blocks(retained))
    blocks.extend(
        build_signature_blocks(
            doc_type,
            fields,
            render_date,
            width=signature_width,
            include_witness=include_witness,
        )
    )
    return blocks


# === Step 1: placeholders ===


def _substitute(text: str, render_date: str) -> str:
    for token in DATE_PLACEHOLDERS:
        text = text.replace(token, render_date)
    for token in IMAGE_PLACEHOLDERS:
        text = text.replace(token, "")
    return text.strip()


def substitute_placeholders(
    sections: Sequence[Section], render_date: str
) -> list[Section]:
    """Replace date tokens and drop image tokens; items left empty are dropped."""
    result: list[Section] = []
    for section in sections:
        content: list[ContentItem] = []
        for item in section.content:
            if isinstance(item, TextItem):
                value = _substitute(item.value, render_date)
                if value:
                    content.append(TextItem(value=value))
            else:
                items = [_substitute(b, render_date) for b in item.items]
                items = [b for b in items if b]
                if items:
                    content.append(BulletsItem(items=items))
        result.append(
            Section(title=_substitute(section.title, render_date), content=content)
        )
    return result


# === Step 5: signature suppression ===


def is_signature_line(line: str) -> bool:
    """Generated signature lines: a SIGNATURE marker or a party label prefix."""
    stripped = line.strip()
    return SIGNATURE_MARKER in stripped or stripped.startswith(SIGNATURE_LINE_PREFIXES)


def suppress_signature_lines(sections: Sequence[Section]) -> list[Section]:
    """Cut the document at the first signature line, in reading order."""
    retained: list[Section] = []
    for section in sections:
        if section.title and is_signature_line(section.title):
            return retained

        content: list[ContentItem] = []
        for item in section.content:
            if isinstance(item, TextItem):
                if is_signature_line(item.value):
                    retained.append(Section(title=section.title, content=content))
                    return retained
                content.append(item)
                continue

            kept: list[str] = []
            for bullet in item.items:
                if is_signature_line(bullet):
                    if kept:
                        content.append(BulletsItem(items=kept))
                    retained.append(Section(title=section.title, content=content))
                    return retained
                kept.append(bullet)
            if kept:
                content.append(BulletsItem(items=kept))

        retained.append(Section(title=section.title, content=content))
    return retained


# === Step 6: section blocks ===


def is_colon_heading(line: str) -> bool:
    """Sub-heading rule: ends with a colon and is not a bullet line."""
    stripped = line.strip()
    return stripped.endswith(":") and not is_bullet(stripped)


def _item_block(item: ContentItem) -> Block:
    if isinstance(item, TextItem):
        return ParagraphBlock(text=item.value)
    return BulletListBlock(items=list(item.items))


def group_content(
    content: Sequence[ContentItem], heading_style: str = "subheading"
) -> list[Block]:
    """Convert items to blocks, nesting everything after a colon line under it."""
    blocks: list[Block] = []
    current: HeadingStack | None = None
    for item in content:
        if isinstance(item, TextItem) and is_colon_heading(item.value):
            current = HeadingStack(heading=item.value, heading_style=heading_style)
            blocks.append(current)
            continue
        block = _item_block(item)
        if current is not None:
            current.children.append(block)
        else:
            blocks.append(block)
    return blocks


def section_blocks(sections: Sequence[Section]) -> list[Block]:
    """Titled sections become heading stacks; untitled content stays top-level."""
    blocks: list[Block] = []
    for section in sections:
        if section.title:
            blocks.append(
                HeadingStack(heading=section.title, children=group_content(section.content))
            )
        else:
            blocks.extend(group_content(section.content, heading_style="heading"))
    return blocks


def _header_row(date: str | None, location: str | None) -> TwoColumnBlock:
    return TwoColumnBlock(
        left=ParagraphBlock(
            text=f"Date: {date}" if date else "", style="small", alignment="left"
        ),
        right=ParagraphBlock(
            text=f"Location: {location}" if location else "",
            style="small",
            alignment="right",
        ),
    )
