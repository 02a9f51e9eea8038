"""Immutable cursor infrastructure for segment-level parsing.

Implements the immutable cursor pattern for zero-`None` parsing over the
subtags of a language tag. The tag is split on "-" once, up front; every
grammar rule then consumes whole segments, never characters.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Character offsets computed on-demand (only for errors)

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
    - Elm Parser
"""

from dataclasses import dataclass, field

from bcp47tags.constants import SEPARATOR

__all__ = ["ParseError", "ParseResult", "SegmentCursor"]


@dataclass(frozen=True, slots=True)
class SegmentCursor:
    """Immutable position over a sequence of subtags.

    Example:
        >>> cursor = SegmentCursor.from_tag("zh-Hant-TW")
        >>> cursor.current
        'zh'
        >>> cursor.advance().current
        'Hant'
        >>> cursor.current  # Original unchanged (immutability)
        'zh'
        >>> cursor.advance(3).is_eof
        True
    """

    segments: tuple[str, ...]
    pos: int = 0

    @classmethod
    def from_tag(cls, tag: str) -> "SegmentCursor":
        """Split a tag on the separator and start at the first segment.

        Empty segments are kept: "en--US" yields ("en", "", "US"), and the
        grammar rejects the empty one.
        """
        return cls(tuple(tag.split(SEPARATOR)), 0)

    @property
    def is_eof(self) -> bool:
        """True when every segment has been consumed."""
        return self.pos >= len(self.segments)

    @property
    def current(self) -> str:
        """Get the current segment.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of tag at segment {self.pos}"
            raise EOFError(msg)
        return self.segments[self.pos]

    @property
    def remaining(self) -> tuple[str, ...]:
        """Segments not yet consumed."""
        return self.segments[self.pos :]

    def peek(self, offset: int = 0) -> str | None:
        """Segment at position + offset, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.segments):
            return None
        return self.segments[target_pos]

    def advance(self, count: int = 1) -> "SegmentCursor":
        """Return new cursor advanced by count segments.

        Args:
            count: Number of segments to consume (default: 1)

        Returns:
            New SegmentCursor (original unchanged), clamped at EOF
        """
        new_pos = min(self.pos + count, len(self.segments))
        return SegmentCursor(self.segments, new_pos)

    def char_offset(self) -> int:
        """Character offset of the current segment in the original tag.

        At EOF this is the length of the tag.

        Example:
            >>> SegmentCursor.from_tag("en-US-foo").advance(2).char_offset()
            6
        """
        if self.is_eof:
            return len(SEPARATOR.join(self.segments))
        return sum(len(s) for s in self.segments[: self.pos]) + len(SEPARATOR) * self.pos


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Pattern:
        Every parser has signature:
            def parse_foo(cursor: SegmentCursor) -> ParseResult[Foo] | None:
                ...
                return ParseResult(parsed_value, new_cursor)

    Example:
        >>> cursor = SegmentCursor.from_tag("en-US")
        >>> result = ParseResult("en", cursor.advance())
        >>> result.value
        'en'
        >>> result.cursor.current
        'US'
    """

    value: T
    cursor: SegmentCursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse error with location and context.

    Produced after a failed parse to explain where consumption stopped. The
    grammar itself never builds one; failure inside the grammar is None.

    Example:
        >>> cursor = SegmentCursor.from_tag("en-US-a").advance(2)
        >>> ParseError("Unexpected subtag", cursor, expected=("variant",)).format_error()
        "position 6 (segment 2 'a'): Unexpected subtag (expected: 'variant')"
    """

    message: str
    cursor: SegmentCursor
    expected: tuple[str, ...] = field(default_factory=tuple)

    def format_error(self) -> str:
        """Format error with character position and segment index."""
        where = f"position {self.cursor.char_offset()} (segment {self.cursor.pos}"
        segment = self.cursor.peek()
        where += f" '{segment}')" if segment is not None else ", end of tag)"
        error_msg = f"{where}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg
