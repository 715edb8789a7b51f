# src/pipeline/errors.py — v1
"""Pipeline-level failures surfaced to callers.

Generation failures and output failures are kept apart so a caller can still
show the generated text when only rendering or storage went wrong.
"""

from __future__ import annotations

from contractgen.config.document_types import DocumentType


class PipelineError(Exception):
    """Base class for contract pipeline failures."""


class TextGenerationFailed(PipelineError):
    """The contract text could not be produced."""

    def __init__(self, document_type: DocumentType, reason: str) -> None:
        self.document_type = document_type
        self.reason = reason
        super().__init__(
            f"Could not produce text for {document_type.value}: {reason}"
        )


class DocumentOutputFailed(PipelineError):
    """Text was generated but the document could not be rendered or stored."""

    def __init__(
        self, document_type: DocumentType, contract_text: str, reason: str
    ) -> None:
        self.document_type = document_type
        self.contract_text = contract_text
        self.reason = reason
        super().__init__(
            f"Could not render/store {document_type.value} document: {reason}"
        )
