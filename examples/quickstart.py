"""Quickstart - Parsing BCP 47 Language Tags.

Demonstrates the main entry points of bcp47tags:

1. Parse tags into structure
2. Round-trip back to a string
3. Get a located diagnostic for a rejected tag
4. Configure the parser
5. Bridge a tag to a Babel Locale

Python 3.13+.
"""

from __future__ import annotations


def example_1_parsing() -> None:
    """Parse tags and inspect the three kinds of result."""
    from bcp47tags import GrandfatheredTag, LangTag, PrivateUseTag, parse

    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    for tag in ("zh-cmn-Hans-CN", "sl-rozaj-biske", "en-GB-oed", "x-whatever", "en-"):
        match parse(tag):
            case LangTag(language=language, script=script, region=region, variants=variants):
                print(f"  {tag}: language={language} script={script} "
                      f"region={region} variants={variants}")
            case PrivateUseTag(subtags=subtags):
                print(f"  {tag}: private use {subtags}")
            case GrandfatheredTag():
                print(f"  {tag}: grandfathered")
            case None:
                print(f"  {tag}: not well-formed")

    print()


def example_2_round_trip() -> None:
    """Structure converts back to exactly the input string."""
    from bcp47tags import parse, to_language_tag

    print("=" * 60)
    print("Example 2: Round Trip")
    print("=" * 60)

    for tag in ("de-CH-x-phonebk", "en-US-u-islamcal", "qaa-Qaaa-QM-x-southern"):
        node = parse(tag)
        assert node is not None
        print(f"  {tag} -> {to_language_tag(node)}")

    print()


def example_3_diagnostics() -> None:
    """Raising entry points carry a located diagnostic."""
    from bcp47tags import LanguageTag, LanguageTagSyntaxError
    from bcp47tags.diagnostics import DiagnosticFormatter, OutputFormat

    print("=" * 60)
    print("Example 3: Diagnostics")
    print("=" * 60)

    try:
        LanguageTag.parse("ar-a-aaa-b-bbb-a-ccc")
    except LanguageTagSyntaxError as e:
        print(e)
        if e.diagnostic is not None:
            print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))

    print()


def example_4_configuration() -> None:
    """Length limit and strict RFC 5646 variants."""
    from bcp47tags import LanguageTagParser

    print("=" * 60)
    print("Example 4: Parser Configuration")
    print("=" * 60)

    lenient = LanguageTagParser()
    strict = LanguageTagParser(strict_variants=True, max_tag_length=64)
    for tag in ("en-US-abcd", "de-CH-1901"):
        print(f"  {tag}: lenient={lenient.parse(tag) is not None} "
              f"strict={strict.parse(tag) is not None}")

    print()


def example_5_babel() -> None:
    """Reduce a tag to a Babel Locale."""
    from bcp47tags import LocaleUnavailableError
    from bcp47tags.locale_utils import get_babel_locale, to_posix

    print("=" * 60)
    print("Example 5: Babel Bridge")
    print("=" * 60)

    for tag in ("zh-Hant-TW", "de-CH-1901", "qaa"):
        try:
            locale = get_babel_locale(tag)
        except LocaleUnavailableError:
            print(f"  {tag}: no locale data")
        else:
            print(f"  {tag} ({to_posix(tag)}): {locale.display_name}")

    print()


def main() -> None:
    """Run all examples."""
    print()
    print("bcp47tags Examples")
    print()

    example_1_parsing()
    example_2_round_trip()
    example_3_diagnostics()
    example_4_configuration()
    example_5_babel()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
