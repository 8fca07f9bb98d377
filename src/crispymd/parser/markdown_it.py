"""markdown-it-py backed parsers (basic and extra dialects)."""

from __future__ import annotations

import logging
from typing import cast

from markdown_it import MarkdownIt
from mdit_py_plugins.attrs import attrs_block_plugin, attrs_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin

logger = logging.getLogger(__name__)

# Only these may be set through {...} attribute blocks.
_ATTRS_ALLOWED = ["id", "class"]


class BasicParser:
    """CommonMark with tables and strikethrough.

    When ``allow_unsafe_html`` is False the ``html`` option is turned off, so
    raw HTML blocks and inline tags in the source are escaped as text.
    """

    def __init__(self, allow_unsafe_html: bool = True) -> None:
        self._allow_unsafe_html = allow_unsafe_html
        self._md = self._build()

    @property
    def allows_unsafe_html(self) -> bool:
        return self._allow_unsafe_html

    def parse(self, markdown: str) -> str:
        if not markdown or not markdown.strip():
            return ""
        return cast(str, self._md.render(markdown))

    def _build(self) -> MarkdownIt:
        md = MarkdownIt("commonmark", {"html": self._allow_unsafe_html})
        md.enable(["table", "strikethrough"])
        return md

    def __repr__(self) -> str:
        return f"{type(self).__name__}(allow_unsafe_html={self._allow_unsafe_html})"


class ExtraParser(BasicParser):
    """Basic dialect plus footnotes, definition lists and ``{#id .class}`` attributes."""

    def _build(self) -> MarkdownIt:
        md = super()._build()
        md.use(footnote_plugin)
        md.use(deflist_plugin)
        md.use(attrs_plugin, allowed=_ATTRS_ALLOWED)
        md.use(attrs_block_plugin, allowed=_ATTRS_ALLOWED)
        logger.debug("Built extra markdown parser (unsafe_html=%s)", self._allow_unsafe_html)
        return md
