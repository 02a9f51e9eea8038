"""Primitive segment parsers for the language tag grammar.

Each primitive looks at exactly one segment. It either fails (returns None)
or succeeds with the segment and a cursor advanced past it. No primitive
succeeds without consuming, which is what lets ``many`` terminate.

Character classes are ASCII-only per RFC 5234 (ALPHA, DIGIT).
str.isalpha() and str.isdigit() would accept "é" or "²".
"""

import string
from collections.abc import Callable

from bcp47tags.syntax.cursor import ParseResult, SegmentCursor

__all__ = [
    "ALPHA",
    "ALPHANUM",
    "DIGIT",
    "Parser",
    "exact_length_alpha",
    "exact_length_digit",
    "pop_if",
    "range_length_alpha",
    "range_length_alphanum",
    "repeat",
    "symbol",
]

type Parser[T] = Callable[[SegmentCursor], ParseResult[T] | None]

ALPHA: frozenset[str] = frozenset(string.ascii_letters)
DIGIT: frozenset[str] = frozenset(string.digits)
ALPHANUM: frozenset[str] = ALPHA | DIGIT


def pop_if(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume the head segment if it satisfies predicate.

    Fails at EOF. On a rejected segment it fails outright; it never skips.

    Example:
        >>> p = pop_if(lambda s: s == "en")
        >>> p(SegmentCursor.from_tag("en-US")).value
        'en'
        >>> p(SegmentCursor.from_tag("de-CH")) is None
        True
    """

    def parse(cursor: SegmentCursor) -> ParseResult[str] | None:
        if cursor.is_eof:
            return None
        head = cursor.current
        if not predicate(head):
            return None
        return ParseResult(head, cursor.advance())

    return parse


def repeat(min_len: int, max_len: int, char_class: frozenset[str]) -> Parser[str]:
    """Segment of min_len..max_len characters, all drawn from char_class.

    An empty segment never matches, since every caller uses min_len >= 1.
    """

    def predicate(segment: str) -> bool:
        return min_len <= len(segment) <= max_len and all(ch in char_class for ch in segment)

    return pop_if(predicate)


def exact_length_alpha(length: int) -> Parser[str]:
    """Exactly ``length`` ASCII letters."""
    return repeat(length, length, ALPHA)


def range_length_alpha(min_len: int, max_len: int) -> Parser[str]:
    """Between min_len and max_len ASCII letters."""
    return repeat(min_len, max_len, ALPHA)


def exact_length_digit(length: int) -> Parser[str]:
    """Exactly ``length`` ASCII digits."""
    return repeat(length, length, DIGIT)


def range_length_alphanum(min_len: int, max_len: int) -> Parser[str]:
    """Between min_len and max_len ASCII letters or digits."""
    return repeat(min_len, max_len, ALPHANUM)


def symbol(literal: str) -> Parser[str]:
    """Segment equal to ``literal`` (case-sensitive)."""
    return pop_if(lambda segment: segment == literal)
