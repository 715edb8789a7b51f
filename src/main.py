# src/main.py — v2
"""CLI entry point — types, layout, generate commands.

Usage:
    contractgen types
    contractgen layout <text-file> -t TYPE [--fields JSON]
    contractgen generate -t TYPE --fields JSON [-o DIR] [--format docx|json]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from contractgen.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="contractgen",
        description=f"contractgen v{__version__} — Contract draft generator",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- types ---
    p_types = subparsers.add_parser(
        "types", help="List contract types and their required fields",
    )
    p_types.set_defaults(func=_cmd_types)

    # --- layout ---
    p_layout = subparsers.add_parser(
        "layout", help="Lay out an existing draft and print the block tree",
    )
    p_layout.add_argument("file", type=Path, help="Path to generated draft text")
    p_layout.add_argument(
        "-t", "--type", dest="doc_type", required=True,
        help="Contract type (e.g. 'Offer Letter' or OFFER_LETTER)",
    )
    p_layout.add_argument(
        "--fields", default="{}",
        help="Form fields as a JSON object (default: {})",
    )
    p_layout.set_defaults(func=_cmd_layout)

    # --- generate ---
    p_generate = subparsers.add_parser(
        "generate", help="Generate, render and store a contract",
    )
    p_generate.add_argument(
        "-t", "--type", dest="doc_type", required=True,
        help="Contract type (e.g. 'Rental Contract' or RENTAL_CONTRACT)",
    )
    p_generate.add_argument(
        "--fields", required=True,
        help="Form fields as a JSON object",
    )
    p_generate.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Artifact directory (default: OUTPUT_ROOT)",
    )
    p_generate.add_argument(
        "--format", dest="output_format", choices=["docx", "json"], default=None,
        help="Output format (default: OUTPUT_FORMAT)",
    )
    p_generate.set_defaults(func=_cmd_generate)

    return parser


async def _cmd_types(args: argparse.Namespace) -> int:
    """Print the contract catalog."""
    from contractgen.config.document_types import REQUIRED_FIELDS, DocumentType

    for doc_type in DocumentType:
        print(f"{doc_type.value} ({doc_type.name})")
        print(f"  required: {', '.join(REQUIRED_FIELDS[doc_type])}")
    return 0


async def _cmd_layout(args: argparse.Namespace) -> int:
    """Run normalize → segment → assemble on a draft file, no LLM call."""
    from contractgen.config.document_types import canonicalize_fields, parse_document_type
    from contractgen.config.settings import Settings
    from contractgen.pipeline.document_pipeline import ContractPipeline

    file_path: Path = args.file
    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        return 1

    doc_type = parse_document_type(args.doc_type)
    fields = _parse_fields(args.fields)
    if fields is None:
        return 1

    pipeline = ContractPipeline(settings=Settings())
    layout = pipeline.build_layout(
        file_path.read_text(encoding="utf-8"),
        doc_type,
        canonicalize_fields(fields),
        pipeline.render_date(),
    )
    print(layout.model_dump_json(indent=2))
    return 0


async def _cmd_generate(args: argparse.Namespace) -> int:
    """Execute a full contract generation."""
    from contractgen.api.facade import generate_contract
    from contractgen.api.models import ContractRequest
    from contractgen.config.document_types import missing_required_fields, parse_document_type
    from contractgen.config.settings import load_settings
    from contractgen.pipeline.errors import DocumentOutputFailed

    doc_type = parse_document_type(args.doc_type)
    fields = _parse_fields(args.fields)
    if fields is None:
        return 1

    request = ContractRequest(document_type=doc_type, fields=fields)
    missing = missing_required_fields(doc_type, request.fields)
    if missing:
        logger.error("Missing required fields for %s: %s", doc_type.value, ", ".join(missing))
        return 1

    overrides: dict[str, Any] = {}
    if args.output is not None:
        overrides["output_root"] = args.output
    if args.output_format is not None:
        overrides["output_format"] = args.output_format
    settings = load_settings(**overrides)

    logger.info("Generating %s", doc_type.value)
    try:
        result = await generate_contract(request, settings=settings)
    except DocumentOutputFailed as exc:
        logger.error("%s", exc)
        print(exc.contract_text)
        return 1

    print(f"\nContract ready:")
    print(f"  Type:       {result.document_type.value}")
    print(f"  File:       {result.file_url}")
    print(f"  Cache hit:  {result.cache_hit}")
    print(f"  Blocks:     {result.block_count}")
    return 0


def _parse_fields(raw: str) -> dict[str, Any] | None:
    """Decode the --fields JSON object, logging and returning None if invalid."""
    try:
        fields = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.error("Invalid --fields JSON: %s", exc)
        return None
    if not isinstance(fields, dict):
        logger.error("--fields must be a JSON object")
        return None
    return fields


def _setup_logging(verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from contractgen.logging.logger import setup_logging

    setup_logging(level="DEBUG" if verbose else "INFO", log_format="text")
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


if __name__ == "__main__":
    sys.exit(main())
