# tests/conftest.py — v2
"""Shared test fixtures for all unit tests.

Provides sample field records, sample drafts, a fake text generator, a frozen
clock and mock LLM clients. No external services; all I/O is local or mocked.
"""

from __future__ import annotations

import base64
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from contractgen.config.document_types import DocumentType
from contractgen.llm.models import LLMResponse

# Smallest valid PNG (1x1 transparent pixel).
PNG_1X1 = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


# === FIXTURES: Sample data ===


@pytest.fixture
def offer_fields() -> dict[str, str]:
    """Complete Offer Letter field record (snake_case)."""
    return {
        "company_name": "Acme",
        "recipient_name": "Jo",
        "position": "Engineer",
        "start_date": "2024-01-01",
        "compensation": "$100k",
        "working_hours": "9-5",
    }


@pytest.fixture
def rental_fields() -> dict[str, str]:
    """Complete Rental Contract field record (snake_case)."""
    return {
        "owner_name": "Pat Owner",
        "owner_address": "1 Main St",
        "recipient_name": "Sam Tenant",
        "property_address": "22 Elm Rd",
        "rent_amount": "$1,200",
        "duration": "12 months",
    }


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_1X1


@pytest.fixture
def png_data_uri() -> str:
    return "data:image/png;base64," + base64.b64encode(PNG_1X1).decode("ascii")


@pytest.fixture
def offer_draft() -> str:
    """Generated Offer Letter text with its own signature lines at the end."""
    return (
        "Dear Jo,\n"
        "\n"
        "OFFER OF EMPLOYMENT:\n"
        "We are pleased to offer you the role of Engineer.\n"
        "Your start date is [Date].\n"
        "- Salary of $100k\n"
        "- Hours 9-5\n"
        "- Health coverage\n"
        "\n"
        "SIGNATURE\n"
        "Authorized Signatory: [SIGNATURE_IMAGE]\n"
        "ACCEPTANCE SECTION\n"
    )


@pytest.fixture
def marked_up_draft() -> str:
    return (
        "<div><span>Date: March 1</span><span>Location: NY</span></div>"
        "Body text"
    )


# === FIXTURES: Time ===


class FrozenClock:
    """Mutable clock returning a fixed UTC datetime."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc))


# === FIXTURES: Generation ===


class FakeGenerator:
    """TextGenerator returning canned text and recording calls."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[DocumentType, dict]] = []

    async def generate(self, document_type: DocumentType, fields) -> str:
        self.calls.append((document_type, dict(fields)))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_generator(offer_draft: str) -> FakeGenerator:
    return FakeGenerator(text=offer_draft)


@pytest.fixture
def mock_llm_client() -> AsyncMock:
    """Mock LLM client returning a plain-text draft."""
    client = AsyncMock()
    client.complete.return_value = LLMResponse(
        content="EMPLOYMENT TERMS\nThe employee will start on Monday.\n",
        input_tokens=120,
        output_tokens=40,
        model="gemini-1.5-pro",
        provider="google",
        latency_ms=350,
    )
    client.provider_name = "google"
    return client


@pytest.fixture
def generator_factory() -> type[FakeGenerator]:
    """The FakeGenerator class, for tests needing custom text or errors."""
    return FakeGenerator
