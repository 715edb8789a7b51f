# src/rendering/base_renderer.py — v1
"""Abstract renderer interface: block tree + styles in, file bytes out."""

from __future__ import annotations

from abc import ABC, abstractmethod

from contractgen.core.models import DocumentLayout


class RenderError(Exception):
    """The layout could not be turned into an artifact (e.g. bad image data)."""


class BaseRenderer(ABC):
    """Unified interface for output renderers."""

    @abstractmethod
    def render(self, layout: DocumentLayout) -> bytes:
        """Render the layout. Raises RenderError on malformed content."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """File extension without the dot (e.g. 'docx')."""

    @property
    @abstractmethod
    def media_type(self) -> str:
        """MIME type of the rendered bytes."""
