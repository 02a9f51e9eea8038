"""LanguageTag value type.

An opaque, immutable wrapper around a well-formed tag string. Construction
from a string and rendering back to a string are its only required
operations; everything structural lives in :mod:`bcp47tags.syntax`.

Python 3.13+.
"""

from dataclasses import dataclass

from bcp47tags.syntax import TagNode, parse_or_raise, serialize
from bcp47tags.syntax import parse as parse_tag

__all__ = ["LanguageTag", "is_well_formed", "parse_or_raise", "to_language_tag"]


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Well-formed BCP 47 language tag.

    Equality and hashing compare the exact string; no case folding is done,
    so LanguageTag("en-US") != LanguageTag("en-us").

    Example:
        >>> tag = LanguageTag.parse("zh-Hant-TW")
        >>> str(tag)
        'zh-Hant-TW'
        >>> tag.node.script
        'Hant'
    """

    value: str

    @classmethod
    def from_canonical(cls, value: str) -> "LanguageTag":
        """Wrap a string already known to be well-formed. No validation."""
        return cls(value)

    @classmethod
    def parse(cls, value: str) -> "LanguageTag":
        """Validate and wrap a tag string.

        Raises:
            LanguageTagSyntaxError: If value is not well-formed
        """
        parse_or_raise(value)
        return cls(value)

    @property
    def node(self) -> TagNode:
        """Structured form, re-parsed on each access.

        Raises:
            LanguageTagSyntaxError: If this tag was built with from_canonical
                from a string that is not actually well-formed
        """
        return parse_or_raise(self.value)

    def __str__(self) -> str:
        return self.value


def to_language_tag(node: TagNode) -> LanguageTag:
    """Convert a parsed structure back to a LanguageTag.

    Pure; the exact left inverse of parsing:
    ``str(to_language_tag(parse(s))) == s`` whenever ``parse(s)`` succeeds.

    Example:
        >>> str(to_language_tag(parse_tag("de-CH-x-phonebk")))
        'de-CH-x-phonebk'
    """
    return LanguageTag.from_canonical(serialize(node))


def is_well_formed(tag: str) -> bool:
    """True if ``tag`` is a well-formed BCP 47 language tag."""
    return parse_tag(tag) is not None
