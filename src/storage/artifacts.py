# src/storage/artifacts.py — v2
"""Artifact naming and persistence.

Every rendered document gets a name derived from its contract type and the
creation time in epoch milliseconds, e.g. ``rental-contract-1700000000000.docx``.
The returned reference is the URL path under which the file is served.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from contractgen.config.document_types import DocumentType, parse_document_type
from contractgen.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class ArtifactWriteError(Exception):
    """The rendered document could not be persisted."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Could not store artifact {name}: {reason}")


class ArtifactStore:
    """Name, write and reference generated documents."""

    def __init__(
        self,
        writer: BaseOutputWriter,
        url_prefix: str = "/uploads",
        clock: Clock | None = None,
    ) -> None:
        self._writer = writer
        self._url_prefix = url_prefix.rstrip("/")
        self._clock = clock or time.time

    @property
    def writer(self) -> BaseOutputWriter:
        return self._writer

    def build_name(
        self,
        document_type: DocumentType | str,
        extension: str,
        epoch_ms: int | None = None,
    ) -> str:
        """Return ``<type-slug>-<epoch-ms>.<extension>``, stamped now by default."""
        doc_type = parse_document_type(document_type)
        if epoch_ms is None:
            epoch_ms = int(self._clock() * 1000)
        return f"{doc_type.slug}-{epoch_ms}.{extension.lstrip('.')}"

    def reference(self, name: str) -> str:
        return f"{self._url_prefix}/{name}"

    async def save(
        self,
        document_type: DocumentType | str,
        content: bytes,
        extension: str,
    ) -> str:
        """Write the artifact and return its reference.

        An existing artifact is never overwritten: when the name is taken the
        timestamp moves forward one millisecond at a time.

        Raises:
            ArtifactWriteError: If the writer fails.
        """
        epoch_ms = int(self._clock() * 1000)
        name = self.build_name(document_type, extension, epoch_ms)
        try:
            while await self._writer.exists(name):
                logger.debug("Artifact name %s taken", name)
                epoch_ms += 1
                name = self.build_name(document_type, extension, epoch_ms)
            await self._writer.write(name, content)
        except Exception as e:
            raise ArtifactWriteError(name, f"{type(e).__name__}: {e}") from e

        ref = self.reference(name)
        logger.info("Stored artifact %s (%d bytes)", ref, len(content))
        return ref
