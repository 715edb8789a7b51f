# src/cache/base_cache_store.py — v2
"""Abstract cache store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from contractgen.cache.models import CacheEntry


class BaseCacheStore(ABC):
    """Unified interface for cache storage backends.

    Stores are plain key/value holders; expiry policy lives in
    GenerationCache so every backend evicts the same way.
    """

    @abstractmethod
    async def get(self, key: str) -> CacheEntry | None:
        """Retrieve cache entry by fingerprint key."""

    @abstractmethod
    async def put(self, key: str, entry: CacheEntry) -> None:
        """Store cache entry, replacing any previous one."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove cache entry (no-op when absent)."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove every entry."""
