# src/api/facade.py — v2
"""Public API facade — single entry point for contract generation.

Usage:
    from contractgen.api.facade import generate_contract
    result = await generate_contract(ContractRequest(document_type=..., fields=...))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contractgen.api.models import ContractRequest, ContractResult
from contractgen.cache.cache_factory import create_cache_store
from contractgen.cache.generation_cache import GenerationCache
from contractgen.config.document_types import parse_document_type
from contractgen.config.settings import Settings

if TYPE_CHECKING:
    from contractgen.generation.generator import TextGenerator
    from contractgen.rendering.base_renderer import BaseRenderer
    from contractgen.storage.artifacts import ArtifactStore

logger = logging.getLogger(__name__)

# Process-wide generation cache, created on first use.
_default_cache: GenerationCache | None = None


def get_default_cache(settings: Settings) -> GenerationCache | None:
    """Return the shared cache, or None when CACHE_ENABLED is false."""
    global _default_cache
    if not settings.cache_enabled:
        return None
    if _default_cache is None:
        _default_cache = GenerationCache(
            create_cache_store(settings),
            ttl_seconds=settings.cache_ttl_seconds,
        )
        logger.info(
            "Generation cache ready: backend=%s, ttl=%ds",
            settings.cache_backend, settings.cache_ttl_seconds,
        )
    return _default_cache


def reset_default_cache() -> None:
    """Drop the shared cache (tests, settings reload)."""
    global _default_cache
    _default_cache = None


async def generate_contract(
    request: ContractRequest,
    settings: Settings | None = None,
    cache: GenerationCache | None = None,
    generator: TextGenerator | None = None,
    renderer: BaseRenderer | None = None,
    artifacts: ArtifactStore | None = None,
) -> ContractResult:
    """Generate, lay out, render and store one contract.

    Collaborators left as None are built from settings: the LLM client from
    LLM_PROVIDER/LLM_MODEL, the renderer from OUTPUT_FORMAT and the artifact
    store from OUTPUT_WRITER. The shared cache is used unless one is given.

    Raises:
        UnknownDocumentTypeError: Before any collaborator is built.
        TextGenerationFailed: If the text generator fails.
        DocumentOutputFailed: If rendering or storage fails.
    """
    parse_document_type(request.document_type)
    settings = settings or Settings()

    if cache is None:
        cache = get_default_cache(settings)

    if generator is None:
        from contractgen.generation.generator import LLMTextGenerator
        from contractgen.llm.client_factory import create_default_client

        generator = LLMTextGenerator(
            create_default_client(settings),
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_output_tokens,
        )

    if renderer is None:
        from contractgen.rendering.renderer_factory import create_renderer

        renderer = create_renderer(settings.output_format)

    if artifacts is None:
        from contractgen.storage.artifacts import ArtifactStore
        from contractgen.storage.writer_factory import create_writer

        artifacts = ArtifactStore(
            create_writer(settings), url_prefix=settings.output_url_prefix
        )

    from contractgen.pipeline.document_pipeline import ContractPipeline

    pipeline = ContractPipeline(
        settings=settings,
        cache=cache,
        generator=generator,
        renderer=renderer,
        artifacts=artifacts,
    )
    return await pipeline.run(request)
