"""Tests for syntax.serializer module."""

from __future__ import annotations

import pytest

from bcp47tags.syntax.ast import GrandfatheredTag, LangTag, PrivateUseTag
from bcp47tags.syntax.serializer import serialize, to_segments


class TestToSegments:
    """Canonical subtag order."""

    def test_full_lang_tag(self) -> None:
        node = LangTag(
            language="sl",
            script="Latn",
            region="IT",
            variants=("rozaj", "biske"),
            extensions=("u-co-phonebk",),
            private_use=("priv",),
        )
        assert to_segments(node) == (
            "sl", "Latn", "IT", "rozaj", "biske", "u-co-phonebk", "x", "priv",
        )

    def test_optional_parts_omitted(self) -> None:
        assert to_segments(LangTag(language="de", region="CH")) == ("de", "CH")

    def test_empty_private_use_emits_no_marker(self) -> None:
        """An empty private-use tuple means no "x" section at all."""
        assert "x" not in to_segments(LangTag(language="en"))

    def test_private_use_tag(self) -> None:
        assert to_segments(PrivateUseTag(("a", "b"))) == ("x", "a", "b")

    def test_grandfathered_verbatim(self) -> None:
        assert to_segments(GrandfatheredTag(("en", "GB", "oed"))) == ("en", "GB", "oed")

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="got str"):
            to_segments("en-US")  # type: ignore[arg-type]


class TestSerialize:
    """String rendering."""

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (LangTag(language="zh-cmn", script="Hans", region="CN"), "zh-cmn-Hans-CN"),
            (LangTag(language="es", region="419"), "es-419"),
            (LangTag(language="en", extensions=("a-myext", "b-another")), "en-a-myext-b-another"),
            (PrivateUseTag(("whatever",)), "x-whatever"),
            (GrandfatheredTag(("i", "klingon")), "i-klingon"),
        ],
    )
    def test_serialize(self, node: LangTag | PrivateUseTag | GrandfatheredTag, expected: str) -> None:
        assert serialize(node) == expected

    def test_no_case_folding(self) -> None:
        assert serialize(LangTag(language="EN", region="us")) == "EN-us"
