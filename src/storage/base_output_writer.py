# src/storage/base_output_writer.py — v3
"""Abstract output writer interface for generated contract artifacts."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseOutputWriter(ABC):
    """Unified interface for artifact storage backends.

    Paths are artifact names relative to the backend root.
    """

    @abstractmethod
    async def write(self, path: str, content: bytes | str) -> None:
        """Store content under the given name, replacing any previous object."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Whether an artifact is already stored under the given name."""
