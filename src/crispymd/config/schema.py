"""Pydantic model for validated renderer configuration."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from crispymd.config import defaults
from crispymd.errors.exceptions import ConfigurationError
from crispymd.types import CacheBackend, FeedMode, ParserType

_CSS_CLASS_RE = re.compile(r"-?[_a-zA-Z][_a-zA-Z0-9-]*")


class RendererConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parser_type: ParserType = ParserType(defaults.DEFAULT_PARSER_TYPE)
    allow_unsafe_html: StrictBool = defaults.DEFAULT_ALLOW_UNSAFE_HTML
    container_class: str = defaults.DEFAULT_CONTAINER_CLASS
    cache_expiration: int = Field(default=defaults.DEFAULT_CACHE_EXPIRATION, gt=0)
    cache_disabled: StrictBool = defaults.DEFAULT_CACHE_DISABLED
    cache_backend: CacheBackend = CacheBackend(defaults.DEFAULT_CACHE_BACKEND)
    cache_db_path: Path | None = None
    cache_memory_mb: float = Field(default=defaults.DEFAULT_CACHE_MEMORY_MB, gt=0)
    cache_disk_mb: float = Field(default=defaults.DEFAULT_CACHE_DISK_MB, gt=0)
    excerpt_length: int = Field(default=defaults.DEFAULT_EXCERPT_LENGTH, gt=0)
    excerpt_more: str = defaults.DEFAULT_EXCERPT_MORE
    feed_mode: FeedMode = FeedMode(defaults.DEFAULT_FEED_MODE)
    log_level: str = defaults.DEFAULT_LOG_LEVEL

    @field_validator("container_class")
    @classmethod
    def _valid_css_classes(cls, value: str) -> str:
        classes = value.split()
        if not classes or not all(_CSS_CLASS_RE.fullmatch(c) for c in classes):
            raise ValueError(f"not a valid CSS class list: {value!r}")
        return " ".join(classes)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


def build_config(raw: dict[str, Any]) -> RendererConfig:
    """Validate a merged config dict, raising ConfigurationError on bad values."""
    try:
        return RendererConfig(**raw)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigurationError(f"Invalid configuration ({fields}): {e}", field=fields) from e
