# src/cache/models.py — v3
"""Cache domain models: CacheEntry."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel


class CacheEntry(BaseModel):
    """Generated contract text stored under a request fingerprint."""

    key: str
    text: str
    created_at: datetime
    expires_at: datetime

    @classmethod
    def create(
        cls, key: str, text: str, now: datetime, ttl_seconds: int
    ) -> CacheEntry:
        """Build an entry that expires ``ttl_seconds`` after ``now``."""
        return cls(
            key=key,
            text=text,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl_seconds),
        )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    @property
    def ttl_seconds(self) -> int:
        """Lifetime in whole seconds, measured on the clock that created it."""
        return int((self.expires_at - self.created_at).total_seconds())
