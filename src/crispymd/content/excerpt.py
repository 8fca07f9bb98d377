"""Plain-text excerpts generated from markdown content."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from crispymd.parser.base import MarkdownParser

DEFAULT_WORD_COUNT = 55
DEFAULT_MORE_TEXT = "…"

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_ENDINGS = (". ", "! ", "? ")
_BLOCK_TAGS = [
    "p", "div", "section", "article", "blockquote", "pre", "br", "hr",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "dl", "dt", "dd",
    "table", "tr", "th", "td", "figcaption",
]


class ExcerptGenerator:
    """Builds word- or sentence-bounded excerpts from rendered markdown.

    Markdown is converted with the given parser first so that syntax
    (emphasis markers, link targets, image sources) never leaks into the
    excerpt; only the visible text is kept.
    """

    def __init__(
        self,
        parser: MarkdownParser,
        word_count: int = DEFAULT_WORD_COUNT,
        more_text: str = DEFAULT_MORE_TEXT,
    ) -> None:
        self._parser = parser
        self._word_count = word_count
        self._more_text = more_text

    @property
    def word_count(self) -> int:
        return self._word_count

    def generate_from_markdown(self, markdown: str, word_count: int | None = None) -> str:
        return self.generate_from_html(self._parser.parse(markdown or ""), word_count)

    def generate_from_html(self, html: str, word_count: int | None = None) -> str:
        """Strip tags, normalize whitespace and trim to ``word_count`` words.

        The "more" marker is appended only when words were dropped.
        """
        return self._trim_words(html_to_text(html), word_count)

    def generate_with_sentence_boundary(
        self,
        markdown: str,
        min_length: int = 100,
        max_length: int = 300,
    ) -> str:
        """Excerpt ending at a sentence boundary between min and max length.

        Falls back to the word-count excerpt when no boundary lies past
        ``min_length``.
        """
        text = html_to_text(self._parser.parse(markdown or ""))
        if len(text) <= min_length:
            return text

        window = text[:max_length]
        last_sentence = max(window.rfind(ending) for ending in _SENTENCE_ENDINGS)
        if last_sentence >= min_length:
            return text[: last_sentence + 1]

        return self._trim_words(text)

    def _trim_words(self, text: str, word_count: int | None = None) -> str:
        if word_count is None:
            word_count = self._word_count
        if not text:
            return ""
        words = text.split(" ")
        if len(words) <= word_count:
            return text
        return " ".join(words[:word_count]) + self._more_text


def html_to_text(html: str) -> str:
    """Visible text of an HTML fragment on a single line."""
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    # Keep block boundaries as word boundaries
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_after("\n")
    return _WHITESPACE_RE.sub(" ", soup.get_text()).strip()
