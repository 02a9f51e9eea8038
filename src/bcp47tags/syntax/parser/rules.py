"""Grammar rules for BCP 47 language tags (RFC 5646 section 2.1).

Each production is a module-level parser built from the primitives and
combinators. The ABNF is reproduced beside each rule; the only deviation is
the variant rule, which by default accepts any 4-8 alphanumeric subtag
(see ``build_language_tag_parser(strict_variants=True)`` for the exact form).

    Language-Tag  = langtag / privateuse / grandfathered
    langtag       = language ["-" script] ["-" region] *("-" variant)
                    *("-" extension) ["-" privateuse]

Ordering:
    Alternatives are tried in the order written. Grandfathered tags come
    first so "en-GB-oed" is never read as language "en" + region "GB", and
    private use comes before langtag so "x-..." is never read as a language.

Extensions:
    Each singleton may introduce at most one extension (RFC 5646 section
    2.2.6). A repeated singleton ends the extension list, and the segments
    left over make the whole tag fail: "ar-a-aaa-b-bbb-a-ccc" is rejected.
"""

from collections.abc import Callable

from bcp47tags.constants import (
    IRREGULAR_GRANDFATHERED,
    PRIVATE_USE_SINGLETON,
    REGULAR_GRANDFATHERED,
    SEPARATOR,
)
from bcp47tags.syntax.ast import GrandfatheredTag, LangTag, PrivateUseTag, TagNode
from bcp47tags.syntax.cursor import ParseResult, SegmentCursor
from bcp47tags.syntax.parser.combinators import (
    ignore,
    keep,
    many,
    many_distinct,
    map_result,
    maybe,
    one_of,
    sequence,
    some,
    succeed,
)
from bcp47tags.syntax.parser.primitives import (
    ALPHANUM,
    DIGIT,
    Parser,
    exact_length_alpha,
    exact_length_digit,
    pop_if,
    range_length_alpha,
    range_length_alphanum,
    symbol,
)

__all__ = [
    "build_language_tag_parser",
    "extension",
    "extlang",
    "grandfathered",
    "langtag",
    "language",
    "language_tag",
    "private_use",
    "region",
    "script",
    "strict_variant",
    "variant",
]


def _join(*parts: str | None) -> str:
    """Join the present parts with the separator, skipping None."""
    return SEPARATOR.join(part for part in parts if part is not None)


def _is_singleton(segment: str) -> bool:
    """Single alphanumeric other than the private-use "x"; "X" is a singleton."""
    return len(segment) == 1 and segment in ALPHANUM and segment != PRIVATE_USE_SINGLETON


def _singleton_key(extension_: str) -> str:
    """Extension singleton, case-folded: "U-co-phonebk" -> "u"."""
    return extension_[0].lower()


def _is_digit_variant(segment: str) -> bool:
    """DIGIT 3alphanum, e.g. "1901" or "1abc"."""
    return (
        len(segment) == 4
        and segment[0] in DIGIT
        and all(ch in ALPHANUM for ch in segment[1:])
    )


# =============================================================================
# Subtag Rules
# =============================================================================

# extlang = 3ALPHA *2("-" 3ALPHA)
extlang: Parser[str] = sequence(
    _join,
    exact_length_alpha(3),
    maybe(exact_length_alpha(3)),
    maybe(exact_length_alpha(3)),
)

# language = 2*3ALPHA ["-" extlang] / 4ALPHA / 5*8ALPHA
language: Parser[str] = one_of(
    sequence(_join, range_length_alpha(2, 3), maybe(extlang)),
    exact_length_alpha(4),
    range_length_alpha(5, 8),
)

# script = 4ALPHA
script: Parser[str] = exact_length_alpha(4)

# region = 2ALPHA / 3DIGIT
region: Parser[str] = one_of(
    exact_length_alpha(2),
    exact_length_digit(3),
)

# Lenient variant: any 4-8 alphanumeric subtag.
variant: Parser[str] = range_length_alphanum(4, 8)

# variant = 5*8alphanum / (DIGIT 3alphanum)
strict_variant: Parser[str] = one_of(
    range_length_alphanum(5, 8),
    pop_if(_is_digit_variant),
)

# extension = singleton 1*("-" (2*8alphanum))
extension: Parser[str] = sequence(
    lambda singleton, subtags: _join(singleton, *subtags),
    pop_if(_is_singleton),
    some(range_length_alphanum(2, 8)),
)

# privateuse = "x" 1*("-" (1*8alphanum)); value excludes the "x"
private_use: Parser[tuple[str, ...]] = keep(
    ignore(succeed(lambda subtags: subtags), symbol(PRIVATE_USE_SINGLETON)),
    some(range_length_alphanum(1, 8)),
)


# =============================================================================
# Grandfathered Tags
# =============================================================================


def _fixed_table(table: frozenset[tuple[str, ...]]) -> Parser[GrandfatheredTag]:
    """Match the remaining segments against a fixed table, verbatim.

    Only a full match counts; "zh-min-nan" is never matched as "zh-min"
    followed by a leftover "nan".
    """

    def parse(cursor: SegmentCursor) -> ParseResult[GrandfatheredTag] | None:
        remaining = cursor.remaining
        if remaining not in table:
            return None
        return ParseResult(GrandfatheredTag(remaining), cursor.advance(len(remaining)))

    return parse


# grandfathered = irregular / regular
grandfathered: Parser[GrandfatheredTag] = one_of(
    _fixed_table(IRREGULAR_GRANDFATHERED),
    _fixed_table(REGULAR_GRANDFATHERED),
)


# =============================================================================
# Top Level
# =============================================================================


def _build_langtag(
    language_: str,
    script_: str | None,
    region_: str | None,
    variants: tuple[str, ...],
    extensions: tuple[str, ...],
    private_use_: tuple[str, ...] | None,
) -> LangTag:
    return LangTag(
        language=language_,
        script=script_,
        region=region_,
        variants=variants,
        extensions=extensions,
        private_use=private_use_ or (),
    )


def _langtag(variant_rule: Parser[str]) -> Parser[LangTag]:
    build: Callable[..., LangTag] = _build_langtag
    return sequence(
        build,
        language,
        maybe(script),
        maybe(region),
        many(variant_rule),
        many_distinct(extension, key=_singleton_key),
        maybe(private_use),
    )


def build_language_tag_parser(*, strict_variants: bool = False) -> Parser[TagNode]:
    """Build the top-level Language-Tag parser.

    Args:
        strict_variants: Enforce RFC 5646 variants exactly (5-8 alphanumerics,
            or a digit followed by 3 alphanumerics) instead of any 4-8
            alphanumeric subtag.

    Returns:
        Parser yielding GrandfatheredTag, PrivateUseTag, or LangTag. It may
        leave segments unconsumed; the caller decides whether that is an error.
    """
    variant_rule = strict_variant if strict_variants else variant
    return one_of(
        grandfathered,
        map_result(PrivateUseTag, private_use),
        _langtag(variant_rule),
    )


langtag: Parser[LangTag] = _langtag(variant)

language_tag: Parser[TagNode] = build_language_tag_parser()
