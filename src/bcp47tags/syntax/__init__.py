"""Language tag syntax package.

Provides the segment cursor, the combinator parser, the tag structure and
serialization. Free of Babel so it can be used on its own.

Python 3.13+.
"""

from .ast import GrandfatheredTag, LangTag, PrivateUseTag, TagNode
from .cursor import ParseError, ParseResult, SegmentCursor
from .parser import LanguageTagParser
from .serializer import serialize, to_segments

__all__ = [
    "GrandfatheredTag",
    "LangTag",
    "LanguageTagParser",
    "ParseError",
    "ParseResult",
    "PrivateUseTag",
    "SegmentCursor",
    "TagNode",
    "parse",
    "parse_or_raise",
    "serialize",
    "to_segments",
]

_DEFAULT_PARSER = LanguageTagParser()


def parse(tag: str) -> TagNode | None:
    """Parse a language tag with the default parser.

    Convenience function for LanguageTagParser().parse().

    Args:
        tag: Candidate language tag

    Returns:
        Parsed tag node, or None if the tag is not well-formed

    Example:
        >>> from bcp47tags.syntax import parse
        >>> parse("en-GB-oed")
        GrandfatheredTag(subtags=('en', 'GB', 'oed'))
    """
    return _DEFAULT_PARSER.parse(tag)


def parse_or_raise(tag: str) -> TagNode:
    """Parse with the default parser, raising on failure.

    Raises:
        LanguageTagSyntaxError: If the tag is not well-formed
    """
    return _DEFAULT_PARSER.parse_or_raise(tag)
