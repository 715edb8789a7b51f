# src/rendering/renderer_factory.py — v1
"""Factory: instantiate renderer from output format."""

from __future__ import annotations

from contractgen.rendering.base_renderer import BaseRenderer


def create_renderer(output_format: str) -> BaseRenderer:
    """Create the renderer for ``output_format`` ('docx' or 'json').

    Raises:
        ValueError: If the format is not supported.
    """
    if output_format == "docx":
        from contractgen.rendering.docx_renderer import DocxRenderer
        return DocxRenderer()

    if output_format == "json":
        from contractgen.rendering.json_renderer import JsonRenderer
        return JsonRenderer()

    raise ValueError(f"Unsupported output format: {output_format!r}")
