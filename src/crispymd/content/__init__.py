"""Content rendering — cached markdown rendering, excerpts and feed bodies."""

from crispymd.content.excerpt import ExcerptGenerator
from crispymd.content.feed import FeedFormatter
from crispymd.content.renderer import MARKDOWN_FIELD, MarkdownRenderer

__all__ = [
    "MARKDOWN_FIELD",
    "ExcerptGenerator",
    "FeedFormatter",
    "MarkdownRenderer",
]
