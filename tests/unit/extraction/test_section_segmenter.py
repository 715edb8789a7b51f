# tests/unit/extraction/test_section_segmenter.py — v1
"""Tests for extraction/section_segmenter.py."""

from __future__ import annotations

import pytest

from contractgen.core.models import BulletsItem, TextItem
from contractgen.extraction.section_segmenter import (
    is_bullet,
    is_heading,
    segment,
    strip_bullet,
)


class TestHeadingRule:
    def test_ten_uppercase_chars_not_heading(self):
        assert is_heading("ABCDEFGHIJ") is False

    def test_eleven_uppercase_chars_is_heading(self):
        assert is_heading("ABCDEFGHIJK") is True

    @pytest.mark.parametrize("line", [
        "TERMS AND CONDITIONS OF EMPLOYMENT a",
        "Terms And Conditions",
        "x" * 80,
    ])
    def test_any_lowercase_never_heading(self, line):
        assert is_heading(line) is False

    def test_surrounding_whitespace_ignored(self):
        assert is_heading("   ABCDEFGHIJ   ") is False
        assert is_heading("  1. PAYMENT TERMS  ") is True


class TestBullets:
    @pytest.mark.parametrize("line,expected", [
        ("• First", "First"),
        ("-   Second", "Second"),
        ("  - Third  ", "Third"),
    ])
    def test_strip_bullet(self, line, expected):
        assert is_bullet(line)
        assert strip_bullet(line) == expected

    def test_not_bullet(self):
        assert is_bullet("Plain text") is False


class TestSegment:
    def test_structure(self):
        text = "\n".join([
            "Dear Jo,",
            "PARTIES AND TERM",
            "This agreement starts today.",
            "- one",
            "- two",
            "Closing words.",
            "COMPENSATION DETAILS",
            "• salary",
            "Paid monthly.",
        ])
        sections = segment(text)
        assert [s.title for s in sections] == ["", "PARTIES AND TERM", "COMPENSATION DETAILS"]
        assert sections[0].content == [TextItem(value="Dear Jo,")]
        assert sections[1].content == [
            TextItem(value="This agreement starts today."),
            BulletsItem(items=["one", "two"]),
            TextItem(value="Closing words."),
        ]
        assert sections[2].content == [
            BulletsItem(items=["salary"]),
            TextItem(value="Paid monthly."),
        ]

    def test_no_leading_section_without_pre_heading_content(self):
        sections = segment("\n\nTERMS AND CONDITIONS\nBody line")
        assert len(sections) == 1
        assert sections[0].title == "TERMS AND CONDITIONS"

    def test_no_headings_keeps_content(self):
        sections = segment("Just a note.\n- a\n- b")
        assert len(sections) == 1
        assert sections[0].title == ""
        assert sections[0].content == [
            TextItem(value="Just a note."),
            BulletsItem(items=["a", "b"]),
        ]

    def test_empty_text(self):
        assert segment("") == []
        assert segment("\n   \n") == []

    def test_contiguous_bullets_one_item(self):
        lines = [f"- item {i}" for i in range(25)]
        sections = segment("\n".join(lines))
        assert sections[0].content == [BulletsItem(items=[f"item {i}" for i in range(25)])]

    def test_blank_line_splits_bullet_runs(self):
        sections = segment("- a\n- b\n\n- c")
        assert sections[0].content == [
            BulletsItem(items=["a", "b"]),
            BulletsItem(items=["c"]),
        ]

    def test_heading_closes_bullet_run(self):
        sections = segment("INTRODUCTION TO TERMS\n- a\nFINAL PROVISIONS\n- b")
        assert sections[0].content == [BulletsItem(items=["a"])]
        assert sections[1].content == [BulletsItem(items=["b"])]

    def test_empty_titled_section_kept(self):
        sections = segment("FIRST SECTION HERE\nSECOND SECTION HERE\nbody")
        assert [s.title for s in sections] == ["FIRST SECTION HERE", "SECOND SECTION HERE"]
        assert sections[0].content == []

    def test_no_line_dropped_or_duplicated(self):
        body = ["Intro line", "GENERAL PROVISIONS", "p1", "- b1", "- b2", "p2", "SIGNATURE BLOCK", "p3"]
        sections = segment("\n".join(body))
        seen: list[str] = []
        for s in sections:
            if s.title:
                seen.append(s.title)
            for item in s.content:
                if isinstance(item, TextItem):
                    seen.append(item.value)
                else:
                    seen.extend(f"- {b}" for b in item.items)
        assert seen == body
