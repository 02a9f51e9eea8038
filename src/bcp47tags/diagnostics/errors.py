"""Language tag exception hierarchy with structured diagnostics.

All exceptions can store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LanguageTagError(Exception):
    """Base exception for all bcp47tags errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LanguageTagError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LanguageTagSyntaxError(LanguageTagError, ValueError):
    """Tag is not well-formed.

    Raised only by the raising entry points (``parse_or_raise``,
    ``LanguageTag.parse``). The plain ``parse`` returns None instead.
    """


class LocaleUnavailableError(LanguageTagError, LookupError):
    """Well-formed tag that Babel has no locale data for."""
