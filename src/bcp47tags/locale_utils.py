"""Locale utilities bridging language tags to Babel.

BCP 47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US) and
understands only language, script, territory and a single variant. This
module reduces a well-formed tag to the part Babel can use and caches the
resulting Locale objects.

Registry semantics (is "qaa" a real language?) are Babel's business, not the
parser's; a well-formed tag may still be unknown to CLDR.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from bcp47tags.constants import MAX_LOCALE_CACHE_SIZE, SEPARATOR
from bcp47tags.diagnostics import ErrorTemplate, LocaleUnavailableError
from bcp47tags.syntax import LangTag
from bcp47tags.tag import LanguageTag

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "to_posix",
]

logger = logging.getLogger(__name__)


def to_posix(tag: LanguageTag | str) -> str:
    """Reduce a language tag to a POSIX locale identifier for Babel.

    Keeps the primary language, script and region. Extlang, variants,
    extensions and private use have no POSIX equivalent and are dropped.

    Args:
        tag: LanguageTag, or a tag string (validated first)

    Returns:
        POSIX-formatted identifier (e.g., "zh_Hant_TW")

    Raises:
        LanguageTagSyntaxError: If a string tag is not well-formed
        LocaleUnavailableError: For private-use and grandfathered tags,
            which have no locale equivalent

    Example:
        >>> to_posix("en-US")
        'en_US'
        >>> to_posix("zh-cmn-Hans-CN-u-co-pinyin")
        'zh_Hans_CN'
    """
    language_tag = tag if isinstance(tag, LanguageTag) else LanguageTag.parse(tag)
    node = language_tag.node
    if not LangTag.guard(node):
        raise LocaleUnavailableError(ErrorTemplate.locale_unknown(str(language_tag)))

    parts = [node.language.split(SEPARATOR)[0]]
    if node.script is not None:
        parts.append(node.script)
    if node.region is not None:
        parts.append(node.region)
    return "_".join(parts)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _load_locale(identifier: str) -> Locale:
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(identifier)


def get_babel_locale(tag: LanguageTag | str) -> Locale:
    """Get a Babel Locale object for a language tag, with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        tag: LanguageTag, or a tag string (validated first)

    Returns:
        Babel Locale object

    Raises:
        LanguageTagSyntaxError: If a string tag is not well-formed
        LocaleUnavailableError: If Babel has no data for the tag

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    identifier = to_posix(tag)
    try:
        return _load_locale(identifier)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Babel has no locale for %r (%s): %s", str(tag), identifier, e)
        raise LocaleUnavailableError(ErrorTemplate.locale_unknown(str(tag))) from e


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    _load_locale.cache_clear()
