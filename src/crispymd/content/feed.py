"""Feed bodies — full rendered HTML or a plain-text excerpt."""

from __future__ import annotations

import logging

from crispymd.content.excerpt import ExcerptGenerator
from crispymd.content.renderer import MarkdownRenderer
from crispymd.types import ContentId, FeedMode

logger = logging.getLogger(__name__)


def resolve_feed_mode(mode: FeedMode | str | None) -> FeedMode:
    """Unknown or missing modes resolve to full content."""
    try:
        return FeedMode(mode)
    except ValueError:
        if mode is not None:
            logger.warning("Unknown feed mode '%s', using '%s'", mode, FeedMode.FULL)
        return FeedMode.FULL


class FeedFormatter:
    """Chooses what a syndication feed carries for a markdown document."""

    def __init__(
        self,
        renderer: MarkdownRenderer,
        excerpts: ExcerptGenerator,
        mode: FeedMode | str = FeedMode.FULL,
    ) -> None:
        self._renderer = renderer
        self._excerpts = excerpts
        self._mode = resolve_feed_mode(mode)

    @property
    def mode(self) -> FeedMode:
        return self._mode

    def format_content(self, content_id: ContentId, markdown: str, fallback: str = "") -> str:
        if not markdown:
            return fallback
        if self._mode == FeedMode.EXCERPT:
            return self._excerpts.generate_from_markdown(markdown)
        return self._renderer.render(content_id, markdown)

    def format_excerpt(self, markdown: str, manual_excerpt: str = "", fallback: str = "") -> str:
        if manual_excerpt:
            return manual_excerpt
        if not markdown:
            return fallback
        return self._excerpts.generate_from_markdown(markdown)
