# src/cache/fingerprint.py — v3
"""Request fingerprinting for the generation cache.

A fingerprint identifies one generation request: the document type plus the
full field record. Field order never changes the key.
"""

from __future__ import annotations

import hashlib
import json

from contractgen.config.document_types import DocumentType
from contractgen.core.models import FieldRecord, FieldValue


def compute_request_key(document_type: DocumentType, fields: FieldRecord) -> str:
    """Compute the cache key for a generation request.

    Args:
        document_type: Requested document type.
        fields: Caller field record (any insertion order).

    Returns:
        ``"<type-slug>:<sha256 hex>"`` over the canonical field serialization.
    """
    return f"{document_type.slug}:{_sha256(canonical_fields(fields))}"


def canonical_fields(fields: FieldRecord) -> str:
    """Serialize fields as JSON with lexicographically sorted keys."""
    payload = {name: _canonical_value(fields[name]) for name in sorted(fields)}
    return json.dumps(
        payload, sort_keys=True, ensure_ascii=False, separators=(",", ":")
    )


def _canonical_value(value: FieldValue) -> str:
    """Binary payloads are reduced to a digest so keys stay small."""
    if isinstance(value, bytes):
        return f"sha256:{hashlib.sha256(value).hexdigest()}"
    return value


def _sha256(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
