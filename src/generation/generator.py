# src/generation/generator.py — v1
"""Contract text generation through an LLM client.

The pipeline only depends on the TextGenerator protocol; LLMTextGenerator is
the production implementation. Failures are not retried here.
"""

from __future__ import annotations

import logging
from typing import Protocol

from contractgen.config.document_types import DocumentType
from contractgen.core.models import FieldRecord
from contractgen.generation.prompts import build_prompt
from contractgen.llm.base_client import BaseLLMClient
from contractgen.llm.models import Message

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The upstream text generator could not produce a draft."""

    def __init__(self, document_type: DocumentType, reason: str) -> None:
        self.document_type = document_type
        self.reason = reason
        super().__init__(f"Generation failed for {document_type.value}: {reason}")


class TextGenerator(Protocol):
    async def generate(self, document_type: DocumentType, fields: FieldRecord) -> str:
        ...


class LLMTextGenerator:
    """Generate drafts by prompting an LLM with the type's template."""

    def __init__(
        self,
        client: BaseLLMClient,
        temperature: float = 0.2,
        max_tokens: int = 2048,
    ) -> None:
        self._client = client
        self._temperature = temperature
        self._max_tokens = max_tokens

    async def generate(self, document_type: DocumentType, fields: FieldRecord) -> str:
        """Return the raw generated draft.

        Raises:
            GenerationError: On any client failure or an empty completion.
        """
        prompt = build_prompt(document_type, fields)
        try:
            response = await self._client.complete(
                [Message(role="user", content=prompt)],
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except Exception as e:
            raise GenerationError(document_type, f"{type(e).__name__}: {e}") from e

        text = response.content.strip()
        if not text:
            raise GenerationError(document_type, "empty completion")

        logger.info(
            "Generated %s draft: provider=%s, tokens=%d/%d, latency=%dms",
            document_type.value,
            response.provider,
            response.input_tokens,
            response.output_tokens,
            response.latency_ms,
        )
        return text
