# src/logging/context.py — v2
"""Contextual logging support — attach request_id, document_type, stage to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging — set per contract request.
_request_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)
_document_type: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document_type", default=None
)
_stage: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "stage", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    request_id: str | None = None
    document_type: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        request_id=_request_id.get(),
        document_type=_document_type.get(),
        stage=_stage.get(),
    )


def set_request_context(request_id: str, document_type: str) -> None:
    """Set request-level context (called once per contract request)."""
    _request_id.set(request_id)
    _document_type.set(document_type)


def set_stage(stage: str | None) -> None:
    """Set the pipeline stage currently executing."""
    _stage.set(stage)


def clear_context() -> None:
    """Reset all context variables."""
    _request_id.set(None)
    _document_type.set(None)
    _stage.set(None)
