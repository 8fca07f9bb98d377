"""Parser factory — picks the dialect and HTML safety mode."""

from __future__ import annotations

import logging

from crispymd.errors.exceptions import ConfigurationError
from crispymd.parser.base import MarkdownParser
from crispymd.parser.markdown_it import BasicParser, ExtraParser
from crispymd.types import ParserType

logger = logging.getLogger(__name__)

_PARSERS: dict[ParserType, type[BasicParser]] = {
    ParserType.BASIC: BasicParser,
    ParserType.EXTRA: ExtraParser,
}


def create_parser(
    parser_type: ParserType | str = ParserType.EXTRA,
    allow_unsafe_html: bool = True,
) -> MarkdownParser:
    """Create a parser for the given dialect.

    Unknown dialect names fall back to ``extra``. A non-boolean
    ``allow_unsafe_html`` is a configuration error.
    """
    if not isinstance(allow_unsafe_html, bool):
        raise ConfigurationError(
            f"allow_unsafe_html must be a bool, got {type(allow_unsafe_html).__name__}",
            field="allow_unsafe_html",
        )

    try:
        resolved = ParserType(parser_type)
    except ValueError:
        logger.warning("Unknown parser type '%s', using '%s'", parser_type, ParserType.EXTRA)
        resolved = ParserType.EXTRA

    return _PARSERS[resolved](allow_unsafe_html=allow_unsafe_html)
