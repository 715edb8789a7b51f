# src/extraction/section_segmenter.py — v1
"""Split a plain-text draft into titled sections.

Single forward pass over the lines. A heading is any line with no lowercase
letters that is longer than 10 characters. Lines starting with a bullet
marker group into one bullet item per contiguous run. Content that appears
before the first heading is kept as a section with an empty title.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from contractgen.core.models import BulletsItem, ContentItem, Section, TextItem

BULLET_MARKERS = ("•", "-")
MIN_HEADING_LENGTH = 11


def is_heading(line: str) -> bool:
    """All-caps rule: no lowercase letters and longer than 10 characters."""
    stripped = line.strip()
    return stripped.upper() == stripped and len(stripped) >= MIN_HEADING_LENGTH


def is_bullet(line: str) -> bool:
    return line.strip().startswith(BULLET_MARKERS)


def strip_bullet(line: str) -> str:
    """Drop the marker character and the whitespace after it."""
    return line.strip()[1:].strip()


@dataclass
class _SegmenterState:
    title: str | None = None
    content: list[ContentItem] = field(default_factory=list)
    bullets: list[str] = field(default_factory=list)
    in_bullet_run: bool = False
    sections: list[Section] = field(default_factory=list)

    def flush_bullets(self) -> None:
        if self.in_bullet_run and self.bullets:
            self.content.append(BulletsItem(items=list(self.bullets)))
        self.bullets = []
        self.in_bullet_run = False

    def emit_section(self) -> None:
        # Untitled leading content is emitted only when something accumulated.
        if self.title is not None:
            self.sections.append(Section(title=self.title, content=self.content))
        elif self.content:
            self.sections.append(Section(title="", content=self.content))
        self.content = []


def segment(text: str) -> list[Section]:
    """Convert normalized plain text into ordered sections.

    Args:
        text: Draft text, one logical line per line.

    Returns:
        Sections in reading order. Pre-heading content, if any, comes first
        as a section with an empty title.
    """
    state = _SegmenterState()

    for line in text.split("\n"):
        stripped = line.strip()

        if not stripped:
            state.flush_bullets()
            continue

        if is_heading(stripped):
            state.flush_bullets()
            state.emit_section()
            state.title = stripped
        elif is_bullet(stripped):
            state.in_bullet_run = True
            state.bullets.append(strip_bullet(stripped))
        else:
            state.flush_bullets()
            state.content.append(TextItem(value=stripped))

    state.flush_bullets()
    state.emit_section()
    return state.sections
