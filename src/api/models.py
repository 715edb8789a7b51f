# src/api/models.py — v2
"""API-level models: ContractRequest, ContractResult."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from contractgen.config.document_types import DocumentType, canonicalize_fields


class ContractRequest(BaseModel):
    """A contract type plus the caller's form fields.

    Field names are accepted in form style (``companyName``) and stored in
    snake_case. The type is resolved by the pipeline, so an unknown type is
    reported as UnknownDocumentTypeError rather than a validation error.
    """

    document_type: DocumentType | str
    fields: dict[str, Any] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def canonical_field_names(cls, v: Any) -> Any:  # noqa: N805
        if isinstance(v, dict):
            return canonicalize_fields(v)
        return v


class ContractResult(BaseModel):
    """Return value of facade.generate_contract()."""

    contract: str
    file_url: str
    document_type: DocumentType
    cache_hit: bool = False
    block_count: int = 0
