"""Serialize a parsed language tag back to its canonical string.

Canonical order is fixed by the grammar, so serialization is the exact left
inverse of parsing: ``serialize(parse(s)) == s`` for every accepted ``s``.
No case folding or reordering is applied.

Python 3.13+.
"""

from bcp47tags.constants import PRIVATE_USE_SINGLETON, SEPARATOR

from .ast import GrandfatheredTag, LangTag, PrivateUseTag, TagNode

__all__ = ["serialize", "to_segments"]


def to_segments(node: TagNode) -> tuple[str, ...]:
    """Canonical subtag sequence for a node.

    Extension and extlang values already contain "-"; they are emitted as-is.

    Raises:
        TypeError: If node is not a tag node
    """
    match node:
        case LangTag():
            segments = [node.language]
            if node.script is not None:
                segments.append(node.script)
            if node.region is not None:
                segments.append(node.region)
            segments.extend(node.variants)
            segments.extend(node.extensions)
            if node.private_use:
                segments.append(PRIVATE_USE_SINGLETON)
                segments.extend(node.private_use)
            return tuple(segments)
        case PrivateUseTag():
            return (PRIVATE_USE_SINGLETON, *node.subtags)
        case GrandfatheredTag():
            return node.subtags
        case _:
            msg = f"Expected LangTag, PrivateUseTag or GrandfatheredTag, got {type(node).__name__}"
            raise TypeError(msg)


def serialize(node: TagNode) -> str:
    """Render a node as its canonical tag string.

    Example:
        >>> serialize(LangTag(language="zh-cmn", script="Hans", region="CN"))
        'zh-cmn-Hans-CN'
        >>> serialize(PrivateUseTag(("whatever",)))
        'x-whatever'
    """
    return SEPARATOR.join(to_segments(node))
