# src/pipeline/document_pipeline.py — v3
"""Contract pipeline — top-level orchestrator for one contract request.

Chains all stages:
  generate  — cached text generation for (type, fields)
  layout    — markup normalization → section segmentation → block assembly
  render    — block tree to file bytes
  store     — artifact write, returns the served reference
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from contractgen.api.models import ContractRequest, ContractResult
from contractgen.config.document_types import (
    DocumentType,
    missing_required_fields,
    parse_document_type,
)
from contractgen.config.settings import Settings
from contractgen.core.models import DocumentLayout, FieldRecord
from contractgen.extraction.markup_normalizer import normalize
from contractgen.extraction.section_segmenter import segment
from contractgen.generation.generator import GenerationError
from contractgen.layout.assembler import assemble
from contractgen.layout.styles import DEFAULT_STYLE_CONFIG
from contractgen.logging.context import clear_context, set_request_context, set_stage
from contractgen.pipeline.errors import (
    DocumentOutputFailed,
    PipelineError,
    TextGenerationFailed,
)
from contractgen.rendering.base_renderer import RenderError
from contractgen.storage.artifacts import ArtifactWriteError

if TYPE_CHECKING:
    from contractgen.cache.generation_cache import GenerationCache
    from contractgen.generation.generator import TextGenerator
    from contractgen.rendering.base_renderer import BaseRenderer
    from contractgen.storage.artifacts import ArtifactStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class ContractPipeline:
    """Turn a contract request into generated text and a stored document.

    Usage:
        pipeline = ContractPipeline(settings, cache, generator, renderer, artifacts)
        result = await pipeline.run(ContractRequest(document_type=..., fields=...))
    """

    def __init__(
        self,
        settings: Settings | None = None,
        cache: GenerationCache | None = None,
        generator: TextGenerator | None = None,
        renderer: BaseRenderer | None = None,
        artifacts: ArtifactStore | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._cache = cache
        self._generator = generator
        self._renderer = renderer
        self._artifacts = artifacts
        self._clock = clock or datetime.now

    @property
    def settings(self) -> Settings:
        return self._settings

    def render_date(self) -> str:
        """Today's date in RENDER_DATE_FORMAT."""
        return self._clock().strftime(self._settings.render_date_format)

    def build_layout(
        self,
        raw_text: str,
        document_type: DocumentType | str,
        fields: FieldRecord,
        render_date: str,
    ) -> DocumentLayout:
        """Normalize, segment and assemble generated text into a layout.

        The header row shows the markup date when one was recovered and
        ``render_date`` otherwise.

        Raises:
            UnknownDocumentTypeError: If ``document_type`` is outside the catalog.
        """
        doc_type = parse_document_type(document_type)

        normalized = normalize(raw_text)
        if normalized.fault:
            logger.warning("Markup normalization recovered: %s", normalized.fault)

        sections = segment(normalized.text)
        blocks = assemble(
            sections,
            fields,
            doc_type,
            normalized.date or render_date,
            normalized.location,
            render_date,
            logo_width=self._settings.logo_width,
            signature_width=self._settings.signature_width,
            include_witness=self._settings.rental_witness_block,
        )
        logger.debug("Built layout: %d sections, %d blocks", len(sections), len(blocks))
        return DocumentLayout(blocks=blocks, styles=DEFAULT_STYLE_CONFIG)

    async def run(self, request: ContractRequest) -> ContractResult:
        """Execute all stages for one request.

        Raises:
            UnknownDocumentTypeError: Before any other work, for an unknown type.
            TextGenerationFailed: If the generator fails (nothing is cached).
            DocumentOutputFailed: If rendering or storage fails.
        """
        doc_type = parse_document_type(request.document_type)
        if self._generator is None or self._renderer is None or self._artifacts is None:
            raise PipelineError("Pipeline requires a generator, a renderer and an artifact store")

        request_id = uuid.uuid4().hex[:12]
        set_request_context(request_id, doc_type.value)
        t0 = time.monotonic()
        try:
            missing = missing_required_fields(doc_type, request.fields)
            if missing:
                logger.warning("Missing required fields: %s", ", ".join(missing))

            set_stage("generate")
            text, cache_hit = await self._generate_text(
                self._generator, doc_type, request.fields
            )

            set_stage("layout")
            layout = self.build_layout(text, doc_type, request.fields, self.render_date())

            set_stage("render")
            try:
                content = self._renderer.render(layout)
            except RenderError as e:
                raise DocumentOutputFailed(doc_type, text, str(e)) from e

            set_stage("store")
            try:
                file_url = await self._artifacts.save(
                    doc_type, content, self._renderer.extension
                )
            except ArtifactWriteError as e:
                raise DocumentOutputFailed(doc_type, text, str(e)) from e

            logger.info(
                "Contract ready: type=%s, cache_hit=%s, blocks=%d, elapsed=%dms",
                doc_type.value, cache_hit, len(layout.blocks),
                int((time.monotonic() - t0) * 1000),
            )
            return ContractResult(
                contract=text,
                file_url=file_url,
                document_type=doc_type,
                cache_hit=cache_hit,
                block_count=len(layout.blocks),
            )
        finally:
            clear_context()

    async def _generate_text(
        self,
        generator: TextGenerator,
        document_type: DocumentType,
        fields: FieldRecord,
    ) -> tuple[str, bool]:
        try:
            if self._cache is None:
                return await generator.generate(document_type, fields), False
            return await self._cache.get_or_generate(
                document_type, fields, generator.generate
            )
        except GenerationError as e:
            raise TextGenerationFailed(document_type, e.reason) from e
