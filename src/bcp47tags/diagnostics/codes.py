"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (tag not well-formed)
        2000-2999: Input limit errors
        3000-3999: Locale bridge errors (Babel lookups)
    """

    # Syntax errors (1000-1999)
    INVALID_LANGUAGE_TAG = 1001
    EMPTY_SUBTAG = 1002
    UNEXPECTED_SUBTAG = 1003
    UNEXPECTED_END = 1004

    # Input limit errors (2000-2999)
    TAG_TOO_LONG = 2001

    # Locale bridge errors (3000-3999)
    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic inside the tag string.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        segment: Index of the offending subtag (0-indexed)
    """

    start: int
    end: int
    segment: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start or segment is negative, or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.segment < 0:
            msg = f"SourceSpan.segment must be >= 0, got {self.segment}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the tag (None for non-syntax errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        input_value: The tag string that was rejected
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[UNEXPECTED_SUBTAG]: Unexpected subtag 'foo' at segment 2
              --> position 6, segment 2
              = help: Subtags must follow language-script-region-variant order
              = note: see https://www.rfc-editor.org/rfc/rfc5646#section-2.1

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
