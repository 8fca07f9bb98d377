"""Top-level entry points: configuration loading and component wiring."""

from __future__ import annotations

import logging
from typing import Any

from crispymd.cache.disk import SQLiteStore
from crispymd.cache.memory import MemoryStore
from crispymd.cache.store import KeyValueStore
from crispymd.config.hierarchy import load_config_hierarchy
from crispymd.config.schema import RendererConfig, build_config
from crispymd.content.excerpt import ExcerptGenerator
from crispymd.content.feed import FeedFormatter
from crispymd.content.renderer import MarkdownRenderer
from crispymd.errors.exceptions import StoreError
from crispymd.parser.base import MarkdownParser
from crispymd.parser.factory import create_parser
from crispymd.types import CacheBackend

logger = logging.getLogger(__name__)


def load_settings(**overrides: Any) -> RendererConfig:
    """Resolve defaults, YAML files, environment and ``overrides`` into a config."""
    return build_config(load_config_hierarchy(**overrides))


def create_store(config: RendererConfig) -> KeyValueStore | None:
    """Open the configured store, or None when caching is disabled.

    A store that cannot be opened disables caching instead of failing.
    """
    if config.cache_disabled:
        return None
    if config.cache_backend == CacheBackend.MEMORY:
        return MemoryStore(max_size_mb=config.cache_memory_mb)
    try:
        return SQLiteStore(db_path=config.cache_db_path, max_size_mb=config.cache_disk_mb)
    except StoreError as e:
        logger.warning("Markdown cache unavailable, rendering without it: %s", e)
        return None


def create_parser_from_config(config: RendererConfig) -> MarkdownParser:
    return create_parser(config.parser_type, allow_unsafe_html=config.allow_unsafe_html)


def create_renderer(
    config: RendererConfig | None = None,
    store: KeyValueStore | None = None,
) -> MarkdownRenderer:
    """Build a renderer from ``config``; an explicit ``store`` wins over the configured one."""
    config = config or load_settings()
    if store is None:
        store = create_store(config)
    return MarkdownRenderer(
        create_parser_from_config(config),
        store=store,
        expiration=config.cache_expiration,
        container_class=config.container_class,
    )


def create_excerpt_generator(config: RendererConfig | None = None) -> ExcerptGenerator:
    config = config or load_settings()
    return ExcerptGenerator(
        create_parser_from_config(config),
        word_count=config.excerpt_length,
        more_text=config.excerpt_more,
    )


def create_feed_formatter(
    renderer: MarkdownRenderer,
    config: RendererConfig | None = None,
) -> FeedFormatter:
    config = config or load_settings()
    return FeedFormatter(renderer, create_excerpt_generator(config), mode=config.feed_mode)
