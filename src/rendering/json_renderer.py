# src/rendering/json_renderer.py — v1
"""JSON renderer: the block tree itself, for external rendering engines."""

from __future__ import annotations

from contractgen.core.models import DocumentLayout
from contractgen.rendering.base_renderer import BaseRenderer


class JsonRenderer(BaseRenderer):
    """Serialize the layout (blocks + styles) as indented JSON."""

    @property
    def extension(self) -> str:
        return "json"

    @property
    def media_type(self) -> str:
        return "application/json"

    def render(self, layout: DocumentLayout) -> bytes:
        return layout.model_dump_json(indent=2).encode("utf-8")
