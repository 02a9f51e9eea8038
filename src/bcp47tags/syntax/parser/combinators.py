"""Combinator algebra over segment parsers.

Builds sequencing, ordered alternation, optionality, and repetition on top
of the primitives. Every combinator is a pure function from parsers to a new
parser; the cursor is threaded by value, never shared.

Repetition is iterative. Input length therefore bounds loop iterations, not
recursion depth, so very long hostile tags cannot exhaust the stack.
"""

from collections.abc import Callable

from bcp47tags.syntax.cursor import ParseResult, SegmentCursor
from bcp47tags.syntax.parser.primitives import Parser

__all__ = [
    "ignore",
    "keep",
    "many",
    "many_distinct",
    "map_result",
    "maybe",
    "one_of",
    "sequence",
    "some",
    "succeed",
]


def succeed[T](value: T) -> Parser[T]:
    """Always succeed with ``value``, consuming nothing."""

    def parse(cursor: SegmentCursor) -> ParseResult[T]:
        return ParseResult(value, cursor)

    return parse


def keep[A, U](func_parser: Parser[Callable[[A], U]], arg_parser: Parser[A]) -> Parser[U]:
    """Run func_parser then arg_parser, and apply the first value to the second.

    Chained as ``keep(keep(succeed(curried), p1), p2)`` it accumulates results
    left to right.
    """

    def parse(cursor: SegmentCursor) -> ParseResult[U] | None:
        func_result = func_parser(cursor)
        if func_result is None:
            return None
        arg_result = arg_parser(func_result.cursor)
        if arg_result is None:
            return None
        return ParseResult(func_result.value(arg_result.value), arg_result.cursor)

    return parse


def sequence[U](combine: Callable[..., U], *parsers: Parser[object]) -> Parser[U]:
    """Apply parsers left to right, then build the value with ``combine``.

    ``combine`` receives one positional argument per parser. Any failing
    step fails the whole sequence; no partial result is returned.

    Example:
        >>> p = sequence(lambda a, b: f"{a}-{b}", exact_length_alpha(2), exact_length_alpha(2))
        >>> p(SegmentCursor.from_tag("en-US")).value
        'en-US'
    """

    def parse(cursor: SegmentCursor) -> ParseResult[U] | None:
        values: list[object] = []
        for parser in parsers:
            result = parser(cursor)
            if result is None:
                return None
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(combine(*values), cursor)

    return parse


def ignore[T](parser: Parser[T], skipped: Parser[object]) -> Parser[T]:
    """Run parser then skipped, keeping only parser's value.

    ``skipped`` must still succeed and its input is still consumed.
    """

    def parse(cursor: SegmentCursor) -> ParseResult[T] | None:
        result = parser(cursor)
        if result is None:
            return None
        skipped_result = skipped(result.cursor)
        if skipped_result is None:
            return None
        return ParseResult(result.value, skipped_result.cursor)

    return parse


def one_of[T](*parsers: Parser[T]) -> Parser[T]:
    """Ordered alternation: first parser that succeeds wins.

    Every alternative starts from the same cursor. Order is grammar priority;
    later alternatives are not tried once one succeeds.
    """

    def parse(cursor: SegmentCursor) -> ParseResult[T] | None:
        for parser in parsers:
            result = parser(cursor)
            if result is not None:
                return result
        return None

    return parse


def maybe[T](parser: Parser[T]) -> Parser[T | None]:
    """Optional: value or None, never fails. Cursor unchanged on None."""

    def parse(cursor: SegmentCursor) -> ParseResult[T | None]:
        result = parser(cursor)
        if result is None:
            return ParseResult(None, cursor)
        return ParseResult(result.value, result.cursor)

    return parse


def many[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Zero or more repetitions, collected in order. Never fails.

    Stops at the first failure, or at a success that consumed nothing.
    """

    def parse(cursor: SegmentCursor) -> ParseResult[tuple[T, ...]]:
        values: list[T] = []
        while True:
            result = parser(cursor)
            if result is None or result.cursor.pos == cursor.pos:
                break
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(tuple(values), cursor)

    return parse


def many_distinct[T](parser: Parser[T], key: Callable[[T], object]) -> Parser[tuple[T, ...]]:
    """Like ``many``, but stops before a value whose key was already seen.

    The repeated value is left unconsumed, so a caller that requires total
    consumption rejects the input.
    """

    def parse(cursor: SegmentCursor) -> ParseResult[tuple[T, ...]]:
        values: list[T] = []
        seen: set[object] = set()
        while True:
            result = parser(cursor)
            if result is None or result.cursor.pos == cursor.pos:
                break
            value_key = key(result.value)
            if value_key in seen:
                break
            seen.add(value_key)
            values.append(result.value)
            cursor = result.cursor
        return ParseResult(tuple(values), cursor)

    return parse


def some[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """One or more repetitions; fails if the first application fails."""
    return sequence(lambda first, rest: (first, *rest), parser, many(parser))


def map_result[T, U](func: Callable[[T], U], parser: Parser[T]) -> Parser[U]:
    """Transform a successful value with ``func``; failure passes through."""

    def parse(cursor: SegmentCursor) -> ParseResult[U] | None:
        result = parser(cursor)
        if result is None:
            return None
        return ParseResult(func(result.value), result.cursor)

    return parse
