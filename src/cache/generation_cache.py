# src/cache/generation_cache.py — v1
"""Fingerprint cache for generated contract text.

Maps (document type, field record) to previously generated raw text with a
fixed time-to-live. Expired entries are evicted lazily, on lookup.

Concurrent misses on the same key may each call the generator; there is no
in-flight coalescing. Failures are never cached.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone

from contractgen.cache.base_cache_store import BaseCacheStore
from contractgen.cache.fingerprint import compute_request_key
from contractgen.cache.models import CacheEntry
from contractgen.config.document_types import DocumentType
from contractgen.core.models import FieldRecord

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 1800

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GenerationCache:
    """TTL cache keyed by request fingerprint, on top of a cache store."""

    def __init__(
        self,
        store: BaseCacheStore,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._ttl = ttl_seconds
        self._clock = clock or _utcnow

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    async def get(self, document_type: DocumentType, fields: FieldRecord) -> str | None:
        """Return cached text, or None on a miss or an expired entry."""
        key = compute_request_key(document_type, fields)
        entry = await self._store.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            logger.debug("Evicting expired cache entry %s", key)
            await self._store.delete(key)
            return None
        return entry.text

    async def put(
        self, document_type: DocumentType, fields: FieldRecord, text: str
    ) -> None:
        key = compute_request_key(document_type, fields)
        entry = CacheEntry.create(key, text, now=self._clock(), ttl_seconds=self._ttl)
        await self._store.put(key, entry)

    async def get_or_generate(
        self,
        document_type: DocumentType,
        fields: FieldRecord,
        generate: Callable[[DocumentType, FieldRecord], Awaitable[str]],
    ) -> tuple[str, bool]:
        """Return ``(text, cache_hit)``, calling ``generate`` on a miss.

        Exceptions from ``generate`` propagate and leave the cache untouched.
        """
        cached = await self.get(document_type, fields)
        if cached is not None:
            logger.info("Cache hit for %s", document_type.value)
            return cached, True

        text = await generate(document_type, fields)
        await self.put(document_type, fields, text)
        return text, False
