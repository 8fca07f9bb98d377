"""Markdown parsers — pure markdown-to-HTML converters."""

from crispymd.parser.base import MarkdownParser
from crispymd.parser.factory import create_parser
from crispymd.parser.markdown_it import BasicParser, ExtraParser

__all__ = [
    "MarkdownParser",
    "BasicParser",
    "ExtraParser",
    "create_parser",
]
