# src/layout/signature_blocks.py — v1
"""Synthesized signature area, one builder per document type.

The assembler drops the signature lines found in generated drafts and
appends the blocks built here instead.
"""

from __future__ import annotations

from collections.abc import Callable

from contractgen.config.document_types import (
    OWNER_SIGNATURE,
    SIGNATURE_IMAGE,
    TENANT_SIGNATURE,
    DocumentType,
    UnknownDocumentTypeError,
)
from contractgen.core.models import (
    Block,
    FieldRecord,
    HeadingStack,
    ImageBlock,
    ParagraphBlock,
    SignatureLineBlock,
    TwoColumnBlock,
)

DEFAULT_SIGNATURE_WIDTH = 150

SignatureBuilder = Callable[[FieldRecord, str, int, bool], list[Block]]


def _text(fields: FieldRecord, name: str) -> str:
    value = fields.get(name)
    if value is None or isinstance(value, bytes):
        return ""
    return str(value)


def _signature_mark(fields: FieldRecord, image_field: str, width: int) -> Block:
    """Signature image when supplied, blank signing space otherwise."""
    image = fields.get(image_field)
    if image:
        return ImageBlock(image_ref=image, width=width)
    return SignatureLineBlock(label="")


def _centered(text: str) -> ParagraphBlock:
    return ParagraphBlock(text=text, alignment="center")


def _party_column(
    label: str, mark: Block, name: str, render_date: str
) -> HeadingStack:
    return HeadingStack(
        heading=label,
        heading_style="subheading",
        alignment="center",
        children=[mark, _centered(name), _centered(render_date)],
    )


def _witness_block() -> HeadingStack:
    return HeadingStack(
        heading="Witness (Optional):",
        heading_style="subheading",
        alignment="center",
        children=[
            SignatureLineBlock(label="Name"),
            SignatureLineBlock(label="Signature"),
            SignatureLineBlock(label="Date"),
        ],
    )


def build_rental_signatures(
    fields: FieldRecord, render_date: str, width: int, include_witness: bool
) -> list[Block]:
    """Owner and tenant side by side, optional witness lines below."""
    blocks: list[Block] = [
        TwoColumnBlock(
            left=_party_column(
                "Owner's Signature",
                _signature_mark(fields, OWNER_SIGNATURE, width),
                _text(fields, "owner_name"),
                render_date,
            ),
            right=_party_column(
                "Tenant's Signature",
                _signature_mark(fields, TENANT_SIGNATURE, width),
                _text(fields, "recipient_name"),
                render_date,
            ),
        )
    ]
    if include_witness:
        blocks.append(_witness_block())
    return blocks


def _authorized_signatory(
    fields: FieldRecord, render_date: str, width: int
) -> HeadingStack:
    return HeadingStack(
        heading="Authorized Signatory:",
        heading_style="subheading",
        alignment="center",
        children=[
            _signature_mark(fields, SIGNATURE_IMAGE, width),
            _centered(_text(fields, "company_name")),
            _centered(f"Date: {render_date}"),
        ],
    )


def _accepted_by(fields: FieldRecord) -> HeadingStack:
    return HeadingStack(
        heading="Accepted By:",
        heading_style="subheading",
        alignment="center",
        children=[
            _centered(_text(fields, "recipient_name")),
            SignatureLineBlock(label="Signature"),
            SignatureLineBlock(label="Date"),
        ],
    )


def build_company_signatures(
    fields: FieldRecord, render_date: str, width: int, include_witness: bool
) -> list[Block]:
    """Company signatory followed by the recipient's acceptance."""
    return [
        _authorized_signatory(fields, render_date, width),
        _accepted_by(fields),
    ]


SIGNATURE_BUILDERS: dict[DocumentType, SignatureBuilder] = {
    DocumentType.OFFER_LETTER: build_company_signatures,
    DocumentType.EMPLOYMENT_CONTRACT: build_company_signatures,
    DocumentType.FREELANCE_CONTRACT: build_company_signatures,
    DocumentType.RENTAL_CONTRACT: build_rental_signatures,
}


def build_signature_blocks(
    document_type: DocumentType,
    fields: FieldRecord,
    render_date: str,
    width: int = DEFAULT_SIGNATURE_WIDTH,
    include_witness: bool = False,
) -> list[Block]:
    """Build the signature area for ``document_type``.

    Raises:
        UnknownDocumentTypeError: If ``document_type`` is not in the catalog.
    """
    builder = SIGNATURE_BUILDERS.get(document_type)  # type: ignore[arg-type]
    if builder is None:
        raise UnknownDocumentTypeError(document_type)
    heading = ParagraphBlock(text="SIGNATURES", style="heading", alignment="center")
    return [heading, *builder(fields, render_date, width, include_witness)]
