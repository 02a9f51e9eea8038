"""bcp47tags - BCP 47 (RFC 5646) language tag parser.

Parses language tags such as "en-US", "zh-Hans-CN" or "x-whatever" into an
immutable structure and renders that structure back to the exact same string.
Checks syntactic well-formedness only; no registry lookups.

Public API:
    parse - Parse a tag into LangTag / PrivateUseTag / GrandfatheredTag, or None
    to_language_tag - Convert a parsed structure back to a LanguageTag
    LanguageTag - Opaque, validated tag value
    LanguageTagParser - Configurable parser (length limit, strict variants)
    is_well_formed - Boolean well-formedness check
    parse_or_raise - Like parse, but raises LanguageTagSyntaxError

Exceptions:
    LanguageTagError - Base exception class
    LanguageTagSyntaxError - Tag is not well-formed
    LocaleUnavailableError - Babel has no data for a well-formed tag

Submodules:
    bcp47tags.syntax - Cursor, combinators, grammar rules, serializer
    bcp47tags.diagnostics - Diagnostic codes, templates and formatting
    bcp47tags.locale_utils - Babel bridge (POSIX identifiers, cached Locales)
"""

from .diagnostics import LanguageTagError, LanguageTagSyntaxError, LocaleUnavailableError
from .syntax import GrandfatheredTag, LangTag, LanguageTagParser, PrivateUseTag, TagNode, parse
from .syntax import serialize as serialize_tag
from .tag import LanguageTag, is_well_formed, parse_or_raise, to_language_tag

# Version information - Auto-populated from package metadata
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("bcp47tags")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# RFC 5646 conformance
__rfc__ = "RFC 5646"
__spec_url__ = "https://www.rfc-editor.org/rfc/rfc5646#section-2.1"

__all__ = [
    "GrandfatheredTag",
    "LangTag",
    "LanguageTag",
    "LanguageTagError",
    "LanguageTagParser",
    "LanguageTagSyntaxError",
    "LocaleUnavailableError",
    "PrivateUseTag",
    "TagNode",
    "__rfc__",
    "__spec_url__",
    "__version__",
    "is_well_formed",
    "parse",
    "parse_or_raise",
    "serialize_tag",
    "to_language_tag",
]
