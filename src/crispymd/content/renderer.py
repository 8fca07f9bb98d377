"""Markdown renderer — read-through cache in front of a parser.

``render()`` looks up a fingerprint of ``(content_id, markdown)`` and only
invokes the parser on a miss. Content lifecycle events purge every entry of
the affected content ID. The cache is best-effort: store failures are logged
and rendering falls back to the parser.
"""

from __future__ import annotations

import html as html_lib
import logging

from crispymd.cache.manager import CacheManager
from crispymd.cache.stats import DEFAULT_TTL_SECONDS, CacheStats
from crispymd.cache.store import KeyValueStore
from crispymd.errors.exceptions import ConfigurationError
from crispymd.parser.base import MarkdownParser
from crispymd.types import ContentId

logger = logging.getLogger(__name__)

# Field holding a document's markdown body in the host CMS.
MARKDOWN_FIELD = "_markdown_content"

DEFAULT_CONTAINER_CLASS = "markdown-body"


class MarkdownRenderer:
    """Cache-backed markdown renderer."""

    def __init__(
        self,
        parser: MarkdownParser,
        store: KeyValueStore | None = None,
        expiration: int = DEFAULT_TTL_SECONDS,
        container_class: str = DEFAULT_CONTAINER_CLASS,
    ) -> None:
        if not isinstance(parser, MarkdownParser):
            raise ConfigurationError(
                f"parser must implement parse(), got {type(parser).__name__}",
                field="parser",
            )
        if not isinstance(container_class, str) or not container_class.strip():
            raise ConfigurationError(
                "container_class must be a non-empty string", field="container_class"
            )
        self._parser = parser
        self._container_class = container_class.strip()
        self._cache = CacheManager(store, expiration=expiration) if store is not None else None

    @property
    def parser(self) -> MarkdownParser:
        return self._parser

    @property
    def cache_enabled(self) -> bool:
        return self._cache is not None

    def render(self, content_id: ContentId, markdown: str) -> str:
        """Render markdown to wrapped HTML, memoized per ``(content_id, markdown)``."""
        markdown = markdown or ""
        if self._cache is None:
            return self.render_without_cache(markdown)

        key = self._cache.generate_key(content_id, markdown)
        try:
            cached = self._cache.lookup(key)
        except Exception as e:
            logger.warning("Cache lookup failed for %s, rendering fresh: %s", key, e)
            cached = None
        if cached is not None:
            logger.debug("Cache hit: %s", key)
            return cached

        logger.debug("Cache miss: %s", key)
        html = self.render_without_cache(markdown)
        try:
            self._cache.store(key, html)
        except Exception as e:
            logger.warning("Cache store failed for %s: %s", key, e)
        return html

    def render_without_cache(self, markdown: str) -> str:
        """Render without reading or writing the cache (live previews)."""
        return self._wrap(self._parser.parse(markdown or ""))

    def invalidate(self, content_id: ContentId) -> int:
        """Purge every cached render of ``content_id``. Returns count removed."""
        if self._cache is None:
            return 0
        try:
            count = self._cache.delete_for_content(content_id)
        except Exception as e:
            logger.warning("Cache invalidation failed for content %s: %s", content_id, e)
            return 0
        if count:
            logger.debug("Invalidated %d cache entries for content %s", count, content_id)
        return count

    def clear_all(self) -> int:
        """Purge every entry this renderer has written."""
        if self._cache is None:
            return 0
        try:
            count = self._cache.clear_all()
        except Exception as e:
            logger.warning("Cache clear failed: %s", e)
            return 0
        logger.info("Cleared %d markdown cache entries", count)
        return count

    def stats(self) -> CacheStats:
        if self._cache is None:
            return CacheStats()
        try:
            return self._cache.stats()
        except Exception as e:
            logger.warning("Cache statistics unavailable: %s", e)
            return CacheStats()

    def close(self) -> None:
        """Release the store, if it holds resources."""
        if self._cache is None:
            return
        close = getattr(self._cache.backend, "close", None)
        if callable(close):
            close()

    # ── Content lifecycle ──

    def on_content_saved(
        self,
        content_id: ContentId,
        *,
        is_revision: bool = False,
        is_autosave: bool = False,
    ) -> int:
        # Revisions and autosaves never change the published body.
        if is_revision or is_autosave:
            return 0
        return self.invalidate(content_id)

    def on_content_deleted(self, content_id: ContentId) -> int:
        return self.invalidate(content_id)

    def on_markdown_field_updated(
        self, content_id: ContentId, field_key: str = MARKDOWN_FIELD
    ) -> int:
        if field_key != MARKDOWN_FIELD:
            return 0
        return self.invalidate(content_id)

    def on_markdown_field_deleted(
        self, content_id: ContentId, field_key: str = MARKDOWN_FIELD
    ) -> int:
        if field_key != MARKDOWN_FIELD:
            return 0
        return self.invalidate(content_id)

    def _wrap(self, html: str) -> str:
        css_class = html_lib.escape(self._container_class, quote=True)
        return f'<div class="{css_class}">{html}</div>'
