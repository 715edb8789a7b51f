# tests/unit/layout/test_signature_blocks.py — v1
"""Tests for layout/signature_blocks.py — per-type signature areas."""

from __future__ import annotations

import pytest

from contractgen.config.document_types import DocumentType, UnknownDocumentTypeError
from contractgen.core.models import (
    HeadingStack,
    ImageBlock,
    ParagraphBlock,
    SignatureLineBlock,
    TwoColumnBlock,
)
from contractgen.layout.signature_blocks import SIGNATURE_BUILDERS, build_signature_blocks

RENDER_DATE = "03/01/2024"


class TestDispatch:
    def test_every_type_has_builder(self):
        assert set(SIGNATURE_BUILDERS) == set(DocumentType)

    def test_unknown_type(self):
        with pytest.raises(UnknownDocumentTypeError):
            build_signature_blocks("Prenup", {}, RENDER_DATE)  # type: ignore[arg-type]

    def test_heading_first(self, offer_fields):
        blocks = build_signature_blocks(DocumentType.OFFER_LETTER, offer_fields, RENDER_DATE)
        assert blocks[0] == ParagraphBlock(text="SIGNATURES", style="heading", alignment="center")


class TestRentalSignatures:
    def test_two_column_is_last(self, rental_fields):
        blocks = build_signature_blocks(DocumentType.RENTAL_CONTRACT, rental_fields, RENDER_DATE)
        last = blocks[-1]
        assert isinstance(last, TwoColumnBlock)
        assert last.left.heading == "Owner's Signature"
        assert last.right.heading == "Tenant's Signature"

    def test_columns_carry_names_and_date(self, rental_fields):
        blocks = build_signature_blocks(DocumentType.RENTAL_CONTRACT, rental_fields, RENDER_DATE)
        left, right = blocks[-1].left, blocks[-1].right
        assert isinstance(left.children[0], SignatureLineBlock)
        assert left.children[1].text == "Pat Owner"
        assert left.children[2].text == RENDER_DATE
        assert right.children[1].text == "Sam Tenant"

    def test_signature_images_used(self, rental_fields, png_data_uri):
        rental_fields["owner_signature"] = png_data_uri
        blocks = build_signature_blocks(
            DocumentType.RENTAL_CONTRACT, rental_fields, RENDER_DATE, width=120
        )
        mark = blocks[-1].left.children[0]
        assert isinstance(mark, ImageBlock)
        assert mark.width == 120
        assert isinstance(blocks[-1].right.children[0], SignatureLineBlock)

    def test_witness_optional(self, rental_fields):
        blocks = build_signature_blocks(
            DocumentType.RENTAL_CONTRACT, rental_fields, RENDER_DATE, include_witness=True
        )
        witness = blocks[-1]
        assert isinstance(witness, HeadingStack)
        assert witness.heading == "Witness (Optional):"
        assert [c.label for c in witness.children] == ["Name", "Signature", "Date"]

    def test_missing_names_blank(self):
        blocks = build_signature_blocks(DocumentType.RENTAL_CONTRACT, {}, RENDER_DATE)
        assert blocks[-1].left.children[1].text == ""


class TestCompanySignatures:
    @pytest.mark.parametrize("doc_type", [
        DocumentType.EMPLOYMENT_CONTRACT,
        DocumentType.FREELANCE_CONTRACT,
        DocumentType.OFFER_LETTER,
    ])
    def test_signatory_then_accepted_by(self, doc_type, offer_fields):
        blocks = build_signature_blocks(doc_type, offer_fields, RENDER_DATE)
        signatory, accepted = blocks[-2], blocks[-1]
        assert signatory.heading == "Authorized Signatory:"
        assert accepted.heading == "Accepted By:"
        assert accepted.children[0].text == "Jo"

    def test_signatory_contents(self, offer_fields, png_bytes):
        offer_fields["signature_image"] = png_bytes
        blocks = build_signature_blocks(DocumentType.EMPLOYMENT_CONTRACT, offer_fields, RENDER_DATE)
        signatory = blocks[-2]
        assert isinstance(signatory.children[0], ImageBlock)
        assert signatory.children[0].image_ref == png_bytes
        assert signatory.children[1].text == "Acme"
        assert signatory.children[2].text == f"Date: {RENDER_DATE}"

    def test_accepted_by_blank_lines(self, offer_fields):
        blocks = build_signature_blocks(DocumentType.FREELANCE_CONTRACT, offer_fields, RENDER_DATE)
        labels = [c.label for c in blocks[-1].children if isinstance(c, SignatureLineBlock)]
        assert labels == ["Signature", "Date"]
