"""Language tag parser module.

Module Organization:
- core.py: LanguageTagParser class and parse() entry point
- primitives.py: Single-segment parsers and ASCII character classes
- combinators.py: Sequencing, alternation, optionality, repetition
- rules.py: RFC 5646 grammar productions

Public API:
    LanguageTagParser: Main parser class
    build_language_tag_parser: Raw grammar (may leave segments unconsumed)
"""

from bcp47tags.syntax.parser.core import LanguageTagParser
from bcp47tags.syntax.parser.rules import build_language_tag_parser

__all__ = ["LanguageTagParser", "build_language_tag_parser"]
