"""Shared enums and type aliases for crispymd."""

from __future__ import annotations

from enum import StrEnum


class ParserType(StrEnum):
    BASIC = "basic"
    EXTRA = "extra"


class CacheBackend(StrEnum):
    SQLITE = "sqlite"
    MEMORY = "memory"


class FeedMode(StrEnum):
    FULL = "full"
    EXCERPT = "excerpt"


# Opaque identifier of a Markdown document (e.g. a post ID).
ContentId = int | str
