# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings: LLM provider,
generation cache, renderer output, artifact storage and logging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM PROVIDER ===
    llm_provider: str = "google"
    llm_model: str = "gemini-1.5-pro"
    llm_temperature: float = 0.2
    llm_top_k: int = 40
    llm_top_p: float = 0.8
    llm_max_output_tokens: int = 2048

    # Provider API keys
    google_api_key: str = ""
    openai_api_key: str = ""

    # === Generation cache ===
    cache_enabled: bool = True
    cache_backend: Literal["memory", "json", "redis"] = "memory"
    cache_ttl_seconds: int = 1800
    cache_root: Path = Path("~/.contractgen/cache")
    cache_redis_url: str = ""

    # === Artifact storage ===
    output_writer: Literal["local", "s3"] = "local"
    output_root: Path = Path("uploads")
    output_url_prefix: str = "/uploads"
    output_s3_bucket: str = ""
    output_s3_prefix: str = "contractgen/"
    output_s3_region: str = ""

    # === Layout / rendering ===
    output_format: Literal["docx", "json"] = "docx"
    render_date_format: str = "%m/%d/%Y"
    logo_width: int = 200
    signature_width: int = 150
    rental_witness_block: bool = False

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("cache_ttl_seconds")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:  # noqa: N805
        if v <= 0:
            raise ValueError("cache_ttl_seconds must be > 0")
        return v

    @field_validator("logo_width", "signature_width")
    @classmethod
    def validate_image_width(cls, v: int) -> int:  # noqa: N805
        if v <= 0:
            raise ValueError("image widths must be > 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if (
            self.cache_enabled
            and self.cache_backend == "redis"
            and not self.cache_redis_url
        ):
            errors.append("CACHE_BACKEND=redis requires CACHE_REDIS_URL")

        if self.output_writer == "s3" and not self.output_s3_bucket:
            errors.append("OUTPUT_WRITER=s3 requires OUTPUT_S3_BUCKET")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-request config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
