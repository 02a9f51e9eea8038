"""Structured representation of a parsed language tag.

Three mutually exclusive node types mirror the top-level RFC 5646
production ``Language-Tag = langtag / privateuse / grandfathered``.
Includes type guards as static methods.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "LangTag",
    "PrivateUseTag",
    "GrandfatheredTag",
    "TagNode",
]


@dataclass(frozen=True, slots=True)
class LangTag:
    """Normal language tag: language[-script][-region]*variant*extension[-x-...].

    Attributes:
        language: Primary language, with any extlang subtags joined by "-"
        script: 4-letter script subtag, if present
        region: 2-letter or 3-digit region subtag, if present
        variants: Variant subtags in input order
        extensions: Extension sections ("u-co-phonebk"), one string each
        private_use: Subtags after "x", without the "x"; empty when absent

    Example:
        >>> LangTag(language="zh-cmn", script="Hans", region="CN")
        LangTag(language='zh-cmn', script='Hans', region='CN', variants=(), ...)
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    private_use: tuple[str, ...] = ()

    @property
    def has_private_use(self) -> bool:
        """True when an "x-..." section was present."""
        return bool(self.private_use)

    @staticmethod
    def guard(node: object) -> TypeIs["LangTag"]:
        """Type guard for LangTag."""
        return isinstance(node, LangTag)


@dataclass(frozen=True, slots=True)
class PrivateUseTag:
    """Whole-tag private use: "x-whatever" -> subtags=("whatever",)."""

    subtags: tuple[str, ...]

    @staticmethod
    def guard(node: object) -> TypeIs["PrivateUseTag"]:
        """Type guard for PrivateUseTag."""
        return isinstance(node, PrivateUseTag)


@dataclass(frozen=True, slots=True)
class GrandfatheredTag:
    """Legacy tag from the fixed RFC 5646 tables, kept verbatim.

    The segments are opaque; "en-GB-oed" is NOT language "en" + region "GB".
    """

    subtags: tuple[str, ...]

    @staticmethod
    def guard(node: object) -> TypeIs["GrandfatheredTag"]:
        """Type guard for GrandfatheredTag."""
        return isinstance(node, GrandfatheredTag)


type TagNode = LangTag | PrivateUseTag | GrandfatheredTag
