"""Shared constants for bcp47tags.

This module provides centralized configuration constants used across
the syntax layer and the public API. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Separators: The only subtag delimiter recognized by the grammar
- Input limits: DoS prevention via size constraints
- Grandfathered tags: Fixed RFC 5646 enumerations
- Cache limits: Memory bounds for the Babel bridge

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separators
    "SEPARATOR",
    "PRIVATE_USE_SINGLETON",
    # Input limits
    "MAX_TAG_LENGTH",
    # Grandfathered tags
    "IRREGULAR_GRANDFATHERED",
    "REGULAR_GRANDFATHERED",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# SEPARATORS
# ============================================================================

# U+002D HYPHEN-MINUS. "_" is NOT an accepted alternative.
SEPARATOR: str = "-"

# Singleton that introduces a private-use section (RFC 5646 "x").
PRIVATE_USE_SINGLETON: str = "x"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum tag length in characters.
# Longer inputs are rejected before splitting. Real tags are far shorter
# (RFC 5646 section 4.4.1 recommends buffers of at least 35 characters).
MAX_TAG_LENGTH: int = 4096

# ============================================================================
# GRANDFATHERED TAGS
# ============================================================================
#
# Stored pre-split so the grammar can compare full segment sequences.
# Matching is case-sensitive and verbatim.

# Irregular: do not match the langtag production at all.
IRREGULAR_GRANDFATHERED: frozenset[tuple[str, ...]] = frozenset(
    tuple(tag.split(SEPARATOR))
    for tag in (
        "en-GB-oed",
        "i-ami",
        "i-bnn",
        "i-default",
        "i-enochian",
        "i-hak",
        "i-klingon",
        "i-lux",
        "i-mingo",
        "i-navajo",
        "i-pwn",
        "i-tao",
        "i-tay",
        "i-tsu",
        "sgn-BE-FR",
        "sgn-BE-NL",
        "sgn-CH-DE",
    )
)

# Regular: match the langtag production, but the subtags carry no meaning.
REGULAR_GRANDFATHERED: frozenset[tuple[str, ...]] = frozenset(
    tuple(tag.split(SEPARATOR))
    for tag in (
        "art-lojban",
        "cel-gaulish",
        "no-bok",
        "no-nyn",
        "zh-guoyu",
        "zh-hakka",
        "zh-min",
        "zh-min-nan",
        "zh-xiang",
    )
)

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances in locale_utils.
MAX_LOCALE_CACHE_SIZE: int = 128
