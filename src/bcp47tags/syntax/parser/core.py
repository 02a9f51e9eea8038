"""Top-level language tag parser.

This module provides the LanguageTagParser class that drives the grammar in
:mod:`bcp47tags.syntax.parser.rules` against a fully segmented tag.

Architecture:
    The tag is split on "-" into a
    :class:`~bcp47tags.syntax.cursor.SegmentCursor`. The Language-Tag rule
    consumes a prefix of the segments and returns a
    :class:`~bcp47tags.syntax.cursor.ParseResult`, or None. A parse succeeds
    only when no segments are left over.

Failure Contract:
    ``parse`` returns None for every rejected input, with no further
    classification. ``diagnose`` and ``parse_or_raise`` add a location and a
    reason after the fact; they never change which inputs are accepted.

Security:
    Includes a configurable input length limit. Over-long input is rejected
    before it is split.
"""

import logging

from bcp47tags.constants import MAX_TAG_LENGTH
from bcp47tags.diagnostics import Diagnostic, ErrorTemplate, LanguageTagSyntaxError, SourceSpan
from bcp47tags.syntax.ast import TagNode
from bcp47tags.syntax.cursor import ParseError, SegmentCursor
from bcp47tags.syntax.parser.primitives import ALPHANUM
from bcp47tags.syntax.parser.rules import build_language_tag_parser

__all__ = ["LanguageTagParser"]

logger = logging.getLogger(__name__)


class LanguageTagParser:
    """BCP 47 language tag parser using immutable segment cursors.

    Design:
    - Stateless after construction; one instance may be shared across threads
    - Grammar built once per instance from pure combinators
    - Repetition is iterative, so segment count never becomes stack depth

    Attributes:
        max_tag_length: Maximum accepted input length in characters (0 disables)
        strict_variants: Whether variants follow the exact RFC 5646 form
    """

    __slots__ = ("_grammar", "_max_tag_length", "_strict_variants")

    def __init__(
        self,
        *,
        max_tag_length: int | None = None,
        strict_variants: bool = False,
    ) -> None:
        """Initialize parser with optional limits.

        Args:
            max_tag_length: Maximum input length (default: 4096 characters).
                            Set to 0 to disable the limit.
            strict_variants: Accept only 5-8 alphanumeric variants or a digit
                             followed by 3 alphanumerics (RFC 5646 exactly).
                             By default any 4-8 alphanumeric subtag is a variant.
        """
        self._max_tag_length = max_tag_length if max_tag_length is not None else MAX_TAG_LENGTH
        self._strict_variants = strict_variants
        self._grammar = build_language_tag_parser(strict_variants=strict_variants)

    @property
    def max_tag_length(self) -> int:
        """Maximum accepted input length in characters."""
        return self._max_tag_length

    @property
    def strict_variants(self) -> bool:
        """Whether the exact RFC 5646 variant form is enforced."""
        return self._strict_variants

    def _exceeds_limit(self, tag: str) -> bool:
        return self._max_tag_length > 0 and len(tag) > self._max_tag_length

    def _run(self, tag: str) -> tuple[TagNode | None, SegmentCursor]:
        """Run the grammar; return the node (if any) and where it stopped."""
        cursor = SegmentCursor.from_tag(tag)
        result = self._grammar(cursor)
        if result is None:
            return None, cursor
        return result.value, result.cursor

    def parse(self, tag: str) -> TagNode | None:
        """Parse a language tag into its structure.

        Args:
            tag: Candidate tag, "-" separated (e.g. "zh-Hant-TW")

        Returns:
            :class:`~bcp47tags.syntax.ast.LangTag`,
            :class:`~bcp47tags.syntax.ast.PrivateUseTag`, or
            :class:`~bcp47tags.syntax.ast.GrandfatheredTag`; None if the tag
            is not well-formed.

        Example:
            >>> parser = LanguageTagParser()
            >>> parser.parse("de-CH-x-phonebk")
            LangTag(language='de', script=None, region='CH', ..., private_use=('phonebk',))
            >>> parser.parse("en-") is None
            True
        """
        if self._exceeds_limit(tag):
            logger.debug(
                "Rejecting tag of length %d (max_tag_length=%d)",
                len(tag),
                self._max_tag_length,
            )
            return None

        node, cursor = self._run(tag)
        if node is None or not cursor.is_eof:
            return None
        return node

    def explain(self, tag: str) -> ParseError | None:
        """Locate where parsing of a rejected tag stopped.

        Returns:
            ParseError at the first segment the grammar could not consume,
            or None if the tag is well-formed or over the length limit.
        """
        if self._exceeds_limit(tag):
            return None
        node, cursor = self._run(tag)
        if node is not None and cursor.is_eof:
            return None
        segment = cursor.current
        if segment == "":
            return ParseError("Empty subtag", cursor)
        if cursor.peek(1) is None and len(segment) == 1 and segment in ALPHANUM:
            return ParseError(
                f"Singleton '{segment}' must be followed by a subtag",
                cursor,
                expected=("subtag",),
            )
        return ParseError(f"Unexpected subtag '{segment}'", cursor)

    def diagnose(self, tag: str) -> Diagnostic | None:
        """Build a Diagnostic for a rejected tag.

        Returns:
            Diagnostic describing the failure, or None if the tag is accepted.
        """
        if self._exceeds_limit(tag):
            return ErrorTemplate.tag_too_long(len(tag), self._max_tag_length)

        error = self.explain(tag)
        if error is None:
            return None

        cursor = error.cursor
        start = cursor.char_offset()
        segment = cursor.current
        span = SourceSpan(start=start, end=start + len(segment), segment=cursor.pos)
        if segment == "":
            return ErrorTemplate.empty_subtag(tag, span)
        if error.expected:
            end_span = SourceSpan(start=len(tag), end=len(tag), segment=cursor.pos + 1)
            return ErrorTemplate.unexpected_end(tag, end_span)
        if cursor.pos == 0:
            return ErrorTemplate.invalid_language_tag(tag)
        return ErrorTemplate.unexpected_subtag(tag, segment, span)

    def parse_or_raise(self, tag: str) -> TagNode:
        """Parse a language tag, raising on failure.

        Raises:
            LanguageTagSyntaxError: If the tag is not well-formed. The error's
                ``diagnostic`` carries the code, location and a hint.
        """
        node = self.parse(tag)
        if node is not None:
            return node
        diagnostic = self.diagnose(tag)
        if diagnostic is None:  # pragma: no cover - parse and diagnose agree
            diagnostic = ErrorTemplate.invalid_language_tag(tag)
        raise LanguageTagSyntaxError(diagnostic)
