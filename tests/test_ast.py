"""Tests for syntax.ast module: node types and type guards."""

from __future__ import annotations

import pytest
from hypothesis import event, given

from bcp47tags import parse
from bcp47tags.syntax.ast import GrandfatheredTag, LangTag, PrivateUseTag

from .strategies import segment_sequences


class TestTypeGuards:
    """Each guard accepts exactly its own node type."""

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (LangTag(language="en"), (True, False, False)),
            (PrivateUseTag(("whatever",)), (False, True, False)),
            (GrandfatheredTag(("i", "ami")), (False, False, True)),
            ("en", (False, False, False)),
            (None, (False, False, False)),
        ],
    )
    def test_guards(self, node: object, expected: tuple[bool, bool, bool]) -> None:
        assert (
            LangTag.guard(node),
            PrivateUseTag.guard(node),
            GrandfatheredTag.guard(node),
        ) == expected

    @given(tag=segment_sequences())
    def test_exactly_one_guard_for_parsed_nodes(self, tag: str) -> None:
        node = parse(tag)
        event(f"outcome={type(node).__name__}")
        matches = [
            LangTag.guard(node),
            PrivateUseTag.guard(node),
            GrandfatheredTag.guard(node),
        ]
        assert matches.count(True) == (0 if node is None else 1)


class TestNodes:
    """Frozen dataclass behavior."""

    def test_lang_tag_defaults(self) -> None:
        node = LangTag(language="de")
        assert node.script is None
        assert node.region is None
        assert node.variants == ()
        assert node.extensions == ()
        assert not node.has_private_use

    def test_immutable(self) -> None:
        node = PrivateUseTag(("a",))
        with pytest.raises(AttributeError):
            node.subtags = ("b",)  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({GrandfatheredTag(("i", "ami")), GrandfatheredTag(("i", "ami"))}) == 1
