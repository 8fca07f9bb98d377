"""Parser contract shared by all Markdown converters."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MarkdownParser(Protocol):
    """Deterministic markdown -> HTML conversion for a fixed configuration.

    Implementations never raise for malformed input: unparseable constructs
    degrade to literal text.
    """

    @property
    def allows_unsafe_html(self) -> bool: ...

    def parse(self, markdown: str) -> str: ...
