"""Hypothesis strategies for bcp47tags property-based testing.

Strategies are organized by domain:

- tags: Subtags, well-formed tag structures, and fuzzing sequences

Usage:
    from tests.strategies import lang_tag_nodes, segment_sequences

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - extensions, lang_tag_nodes, segment_sequences
"""

from .tags import (
    ALPHANUM_CHARS,
    GRANDFATHERED_TAGS,
    SINGLETON_CHARS,
    extension_subtags,
    extensions,
    grandfathered_tag_nodes,
    grandfathered_tags,
    lang_tag_nodes,
    languages,
    private_use_subtags,
    private_use_tag_nodes,
    regions,
    scripts,
    segment_sequences,
    variants,
)

__all__ = [
    "ALPHANUM_CHARS",
    "GRANDFATHERED_TAGS",
    "SINGLETON_CHARS",
    "extension_subtags",
    "extensions",
    "grandfathered_tag_nodes",
    "grandfathered_tags",
    "lang_tag_nodes",
    "languages",
    "private_use_subtags",
    "private_use_tag_nodes",
    "regions",
    "scripts",
    "segment_sequences",
    "variants",
]
