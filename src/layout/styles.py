# src/layout/styles.py — v1
"""Default named styles supplied to renderers with every layout."""

from __future__ import annotations

from contractgen.core.models import StyleConfig, TextStyle

DEFAULT_STYLE_CONFIG = StyleConfig(
    styles={
        "title": TextStyle(font_size=16, bold=True, margin=(0, 10, 0, 10)),
        "heading": TextStyle(font_size=14, bold=True, margin=(0, 10, 0, 5)),
        "subheading": TextStyle(font_size=12, bold=True),
        "paragraph": TextStyle(font_size=10, margin=(0, 5, 0, 5)),
        "small": TextStyle(font_size=8),
    },
    default_font_size=10,
    page_margins=(40, 40, 40, 40),
)
