# tests/unit/cache/test_generation_cache.py — v1
"""Tests for cache/generation_cache.py — TTL, eviction, get_or_generate."""

from __future__ import annotations

from datetime import timedelta

import pytest

from contractgen.cache.generation_cache import DEFAULT_TTL_SECONDS, GenerationCache
from contractgen.cache.memory_store import MemoryCacheStore
from contractgen.config.document_types import DocumentType
from contractgen.generation.generator import GenerationError

OFFER = DocumentType.OFFER_LETTER
EPSILON = timedelta(milliseconds=1)


@pytest.fixture
def store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def cache(store, frozen_clock) -> GenerationCache:
    return GenerationCache(store, ttl_seconds=DEFAULT_TTL_SECONDS, clock=frozen_clock)


class TestGetPut:
    def test_default_ttl(self, store):
        assert GenerationCache(store).ttl_seconds == 1800

    @pytest.mark.asyncio
    async def test_miss(self, cache, offer_fields):
        assert await cache.get(OFFER, offer_fields) is None

    @pytest.mark.asyncio
    async def test_hit_regardless_of_field_order(self, cache, offer_fields):
        await cache.put(OFFER, offer_fields, "draft")
        reordered = dict(reversed(list(offer_fields.items())))
        assert await cache.get(OFFER, reordered) == "draft"

    @pytest.mark.asyncio
    async def test_types_do_not_collide(self, cache, offer_fields):
        await cache.put(OFFER, offer_fields, "offer draft")
        assert await cache.get(DocumentType.EMPLOYMENT_CONTRACT, offer_fields) is None


class TestTtl:
    @pytest.mark.asyncio
    async def test_retrievable_just_before_expiry(self, cache, frozen_clock, offer_fields):
        start = frozen_clock.now
        await cache.put(OFFER, offer_fields, "draft")
        frozen_clock.now = start + timedelta(seconds=DEFAULT_TTL_SECONDS) - EPSILON
        assert await cache.get(OFFER, offer_fields) == "draft"

    @pytest.mark.asyncio
    async def test_absent_just_after_expiry(self, cache, frozen_clock, offer_fields):
        start = frozen_clock.now
        await cache.put(OFFER, offer_fields, "draft")
        frozen_clock.now = start + timedelta(seconds=DEFAULT_TTL_SECONDS) + EPSILON
        assert await cache.get(OFFER, offer_fields) is None

    @pytest.mark.asyncio
    async def test_expired_entry_removed(self, cache, store, frozen_clock, offer_fields):
        await cache.put(OFFER, offer_fields, "draft")
        assert len(store) == 1
        frozen_clock.now += timedelta(hours=1)
        await cache.get(OFFER, offer_fields)
        assert len(store) == 0


class TestGetOrGenerate:
    @pytest.mark.asyncio
    async def test_miss_then_hit(self, cache, fake_generator, offer_fields):
        text, hit = await cache.get_or_generate(OFFER, offer_fields, fake_generator.generate)
        assert hit is False
        assert text == fake_generator.text

        text2, hit2 = await cache.get_or_generate(OFFER, offer_fields, fake_generator.generate)
        assert hit2 is True
        assert text2 == text
        assert len(fake_generator.calls) == 1

    @pytest.mark.asyncio
    async def test_failure_not_cached(self, cache, store, offer_fields):
        async def failing(document_type, fields):
            raise GenerationError(document_type, "quota exceeded")

        with pytest.raises(GenerationError):
            await cache.get_or_generate(OFFER, offer_fields, failing)
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_regenerates_after_expiry(self, cache, fake_generator, frozen_clock, offer_fields):
        await cache.get_or_generate(OFFER, offer_fields, fake_generator.generate)
        frozen_clock.now += timedelta(seconds=DEFAULT_TTL_SECONDS + 1)
        _, hit = await cache.get_or_generate(OFFER, offer_fields, fake_generator.generate)
        assert hit is False
        assert len(fake_generator.calls) == 2
