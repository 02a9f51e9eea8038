"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://www.rfc-editor.org/rfc/rfc5646"

    @staticmethod
    def invalid_language_tag(tag: str) -> Diagnostic:
        """Tag rejected without a more specific location.

        Args:
            tag: The rejected input

        Returns:
            Diagnostic for INVALID_LANGUAGE_TAG
        """
        msg = f"'{tag}' is not a well-formed BCP 47 language tag"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LANGUAGE_TAG,
            message=msg,
            span=None,
            hint="A tag starts with a 2-8 letter language subtag, 'x-', or a grandfathered tag",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.1",
            input_value=tag,
        )

    @staticmethod
    def empty_subtag(tag: str, span: SourceSpan) -> Diagnostic:
        """Empty subtag produced by a leading, trailing, or doubled separator.

        Args:
            tag: The rejected input
            span: Location of the empty subtag

        Returns:
            Diagnostic for EMPTY_SUBTAG
        """
        msg = f"Empty subtag at position {span.start} in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_SUBTAG,
            message=msg,
            span=span,
            hint="Remove the leading, trailing, or repeated '-'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.1",
            input_value=tag,
        )

    @staticmethod
    def unexpected_subtag(tag: str, subtag: str, span: SourceSpan) -> Diagnostic:
        """Subtag that no grammar rule could consume.

        Args:
            tag: The rejected input
            subtag: The first subtag left unconsumed
            span: Location of that subtag

        Returns:
            Diagnostic for UNEXPECTED_SUBTAG
        """
        msg = f"Unexpected subtag '{subtag}' at segment {span.segment} in '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_SUBTAG,
            message=msg,
            span=span,
            hint=(
                "Subtags must follow the order language-script-region-variant-"
                "extension-privateuse with valid lengths"
            ),
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.1",
            input_value=tag,
        )

    @staticmethod
    def unexpected_end(tag: str, span: SourceSpan) -> Diagnostic:
        """Tag ended where a further subtag was required.

        Args:
            tag: The rejected input
            span: Zero-width span at the end of the input

        Returns:
            Diagnostic for UNEXPECTED_END
        """
        msg = f"Unexpected end of tag '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END,
            message=msg,
            span=span,
            hint="A singleton ('x' or an extension letter) must be followed by a subtag",
            help_url=f"{ErrorTemplate._DOCS_BASE}#section-2.2.6",
            input_value=tag,
        )

    @staticmethod
    def tag_too_long(length: int, max_length: int) -> Diagnostic:
        """Input exceeded the configured length limit.

        Args:
            length: Actual input length
            max_length: Configured maximum

        Returns:
            Diagnostic for TAG_TOO_LONG
        """
        msg = f"Tag length ({length:,} characters) exceeds maximum ({max_length:,})"
        return Diagnostic(
            code=DiagnosticCode.TAG_TOO_LONG,
            message=msg,
            span=None,
            hint="Configure max_tag_length in LanguageTagParser to increase the limit",
        )

    @staticmethod
    def locale_unknown(tag: str) -> Diagnostic:
        """Babel has no locale data for a well-formed tag.

        Args:
            tag: The canonical tag string

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"No locale data available for '{tag}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            span=None,
            hint="Well-formed tags are not necessarily known to CLDR",
            input_value=tag,
        )
