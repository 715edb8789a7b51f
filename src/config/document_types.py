# src/config/document_types.py — v1
"""Declarative document type catalog.

Lists the contract types the generator knows how to draft, the form fields
each of them requires and the field names that carry images.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum


class DocumentType(str, Enum):
    """Closed set of supported documents. The value is the display label."""

    OFFER_LETTER = "Offer Letter"
    EMPLOYMENT_CONTRACT = "Employment Contract"
    RENTAL_CONTRACT = "Rental Contract"
    FREELANCE_CONTRACT = "Freelance Contract"

    @property
    def slug(self) -> str:
        """Lowercase, dash-separated label (used in keys and file names)."""
        return re.sub(r"\s+", "-", self.value.lower())


class UnknownDocumentTypeError(ValueError):
    """Raised when a caller asks for a document type outside the catalog."""

    def __init__(self, document_type: object) -> None:
        self.document_type = document_type
        self.valid_types = [t.value for t in DocumentType]
        super().__init__(
            f"Unknown contract type: {document_type!r}. "
            f"Valid types: {', '.join(self.valid_types)}"
        )


# Labels accepted in addition to the enum values and names.
_ALIASES: dict[str, DocumentType] = {
    "job contract": DocumentType.EMPLOYMENT_CONTRACT,
}

REQUIRED_FIELDS: dict[DocumentType, tuple[str, ...]] = {
    DocumentType.OFFER_LETTER: (
        "company_name",
        "recipient_name",
        "position",
        "start_date",
        "compensation",
        "working_hours",
    ),
    DocumentType.EMPLOYMENT_CONTRACT: (
        "company_name",
        "recipient_name",
        "position",
        "start_date",
        "compensation",
        "working_hours",
    ),
    DocumentType.RENTAL_CONTRACT: (
        "owner_name",
        "owner_address",
        "recipient_name",
        "property_address",
        "rent_amount",
        "duration",
    ),
    DocumentType.FREELANCE_CONTRACT: (
        "company_name",
        "recipient_name",
        "project_scope",
        "deliverables",
        "payment_terms",
    ),
}

# Fields whose values are image references (data URIs or raw bytes).
LOGO_IMAGE = "logo_image"
SIGNATURE_IMAGE = "signature_image"
OWNER_SIGNATURE = "owner_signature"
TENANT_SIGNATURE = "tenant_signature"
IMAGE_FIELDS: frozenset[str] = frozenset(
    {LOGO_IMAGE, SIGNATURE_IMAGE, OWNER_SIGNATURE, TENANT_SIGNATURE}
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def parse_document_type(value: DocumentType | str) -> DocumentType:
    """Resolve a document type from its enum member, label or name.

    Raises:
        UnknownDocumentTypeError: If the value matches no known type.
    """
    if isinstance(value, DocumentType):
        return value
    if isinstance(value, str):
        key = value.strip()
        for doc_type in DocumentType:
            if key.lower() in (doc_type.value.lower(), doc_type.name.lower()):
                return doc_type
        alias = _ALIASES.get(key.lower())
        if alias is not None:
            return alias
    raise UnknownDocumentTypeError(value)


def canonical_field_name(name: str) -> str:
    """Convert a form field name (``companyName``) to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).lower()


def canonicalize_fields(fields: Mapping[str, object]) -> dict[str, object]:
    """Return a copy of ``fields`` with snake_case keys."""
    return {canonical_field_name(k): v for k, v in fields.items()}


def missing_required_fields(
    document_type: DocumentType, fields: Mapping[str, object]
) -> list[str]:
    """List required fields that are absent or blank for ``document_type``."""
    missing: list[str] = []
    for name in REQUIRED_FIELDS[document_type]:
        value = fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing
