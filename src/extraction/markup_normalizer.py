# src/extraction/markup_normalizer.py — v1
"""Strip inline container markup from generated drafts.

Generators sometimes wrap the letter header in ``<div>``/``<span>`` markup
carrying the date and place of signature. This module recovers those two
values and returns plain text. Text without such markup passes through
untouched.
"""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from contractgen.core.models import NormalizedText

logger = logging.getLogger(__name__)

_MARKUP_TOKENS = ("<div", "<span")
_DATE_LABEL = "Date:"
_LOCATION_LABEL = "Location:"

_SPAN_RE = re.compile(r"<span\b[^>]*>(.*?)</span>", re.IGNORECASE | re.DOTALL)
_CONTAINER_TAG_RE = re.compile(r"</?(?:div|span)\b[^>]*>", re.IGNORECASE)
_BLANK_RUN_RE = re.compile(r"\n\s*\n")


def has_markup(text: str) -> bool:
    """Whether the text contains any container markup token."""
    return any(token in text for token in _MARKUP_TOKENS)


def normalize(raw_text: str) -> NormalizedText:
    """Extract date/location metadata and remove container markup.

    Never raises. On an internal error the original text is returned with no
    metadata and ``fault`` describing the error.
    """
    if not has_markup(raw_text):
        return NormalizedText(text=raw_text)

    try:
        return _normalize_markup(raw_text)
    except Exception as e:  # noqa: BLE001
        return NormalizedText(text=raw_text, fault=f"{type(e).__name__}: {e}")


def _normalize_markup(raw_text: str) -> NormalizedText:
    found: dict[str, str] = {}

    def _consume(match: re.Match[str]) -> str:
        content = BeautifulSoup(match.group(1), "html.parser").get_text().strip()
        if content.startswith(_DATE_LABEL) and "date" not in found:
            found["date"] = content[len(_DATE_LABEL):].strip()
            return ""
        if _LOCATION_LABEL in content and "location" not in found:
            found["location"] = content.split(_LOCATION_LABEL, 1)[1].strip()
            return ""
        return match.group(0)

    text = _SPAN_RE.sub(_consume, raw_text)
    text = _CONTAINER_TAG_RE.sub("", text)
    text = _BLANK_RUN_RE.sub("\n\n", text).strip()

    logger.debug(
        "Normalized markup: date=%s, location=%s",
        found.get("date"), found.get("location"),
    )
    return NormalizedText(
        text=text,
        date=found.get("date"),
        location=found.get("location"),
    )
