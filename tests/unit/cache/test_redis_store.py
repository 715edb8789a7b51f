# tests/unit/cache/test_redis_store.py — v3
"""Tests for cache/redis_store.py — mocked Redis client."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from contractgen.cache.models import CacheEntry
from contractgen.cache.redis_store import RedisCacheStore


@pytest.fixture
def redis_store():
    """RedisCacheStore backed by a dict-emulating MagicMock."""
    data: dict[str, str] = {}
    expiries: dict[str, int] = {}

    client = MagicMock()

    def _set(key, value, ex=None):
        data[key] = value
        expiries[key] = ex

    def _delete(*keys):
        for key in keys:
            data.pop(key, None)

    client.get.side_effect = lambda key: data.get(key)
    client.set.side_effect = _set
    client.delete.side_effect = _delete
    client.scan_iter.side_effect = lambda match: [
        k for k in list(data) if k.startswith(match.rstrip("*"))
    ]

    with patch("contractgen.cache.redis_store.RedisCacheStore.__init__", return_value=None):
        store = RedisCacheStore.__new__(RedisCacheStore)
        store._client = client

    store.data = data  # type: ignore[attr-defined]
    store.expiries = expiries  # type: ignore[attr-defined]
    return store


def _fresh_entry(key: str, ttl: int = 1800) -> CacheEntry:
    return CacheEntry.create(key, "draft", now=datetime.now(timezone.utc), ttl_seconds=ttl)


class TestRedisCacheStore:
    @pytest.mark.asyncio
    async def test_put_get(self, redis_store):
        await redis_store.put("k", _fresh_entry("k"))
        entry = await redis_store.get("k")
        assert entry is not None
        assert entry.text == "draft"
        assert "contractgen:cache:k" in redis_store.data

    @pytest.mark.asyncio
    async def test_put_sets_native_expiry(self, redis_store):
        await redis_store.put("k", _fresh_entry("k", ttl=600))
        assert redis_store.expiries["contractgen:cache:k"] == 600

    @pytest.mark.asyncio
    async def test_expiry_follows_entry_clock(self, redis_store):
        frozen = datetime.now(timezone.utc) - timedelta(hours=1)
        entry = CacheEntry.create("k", "draft", now=frozen, ttl_seconds=1800)
        await redis_store.put("k", entry)
        assert redis_store.expiries["contractgen:cache:k"] == 1800

    @pytest.mark.asyncio
    async def test_miss(self, redis_store):
        assert await redis_store.get("nope") is None

    @pytest.mark.asyncio
    async def test_corrupt_payload_is_miss(self, redis_store):
        redis_store.data["contractgen:cache:k"] = "{broken"
        assert await redis_store.get("k") is None

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, redis_store):
        await redis_store.put("a", _fresh_entry("a"))
        await redis_store.put("b", _fresh_entry("b"))
        await redis_store.delete("a")
        assert await redis_store.get("a") is None
        await redis_store.clear()
        assert redis_store.data == {}
