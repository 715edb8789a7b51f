# src/cache/redis_store.py — v3
"""Redis-based cache store (CACHE_BACKEND=redis).

Requires 'redis' package: pip install redis.
Suitable for multi-instance deployments sharing one generation cache.
"""

from __future__ import annotations

import json
import logging
from pydantic import ValidationError

from contractgen.cache.base_cache_store import BaseCacheStore
from contractgen.cache.models import CacheEntry

logger = logging.getLogger(__name__)

_KEY_PREFIX = "contractgen:cache:"


class RedisCacheStore(BaseCacheStore):
    """Redis-backed cache store.

    Keys also carry a native Redis expiry equal to the entry lifetime, so
    stale drafts disappear even if nobody reads them again.
    """

    def __init__(self, redis_url: str) -> None:
        try:
            import redis
        except ImportError as e:
            raise ImportError(
                "redis package required: pip install redis"
            ) from e

        self._client = redis.Redis.from_url(redis_url, decode_responses=True)

    async def get(self, key: str) -> CacheEntry | None:
        data = self._client.get(f"{_KEY_PREFIX}{key}")
        if data is None:
            return None
        try:
            return CacheEntry(**json.loads(data))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Failed to deserialize cache entry %s: %s", key, e)
            return None

    async def put(self, key: str, entry: CacheEntry) -> None:
        self._client.set(
            f"{_KEY_PREFIX}{key}", entry.model_dump_json(), ex=max(entry.ttl_seconds, 1)
        )

    async def delete(self, key: str) -> None:
        self._client.delete(f"{_KEY_PREFIX}{key}")

    async def clear(self) -> None:
        keys = list(self._client.scan_iter(match=f"{_KEY_PREFIX}*"))
        if keys:
            self._client.delete(*keys)

    def close(self) -> None:
        """Close the Redis connection."""
        self._client.close()
