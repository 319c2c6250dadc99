"""Domain model for listing entries and their bounded-depth trees.

This package contains the non-rendering primitives:
- the ``Entry`` datatype with optional nested children
- pure glyph/size/kind-tag classification
- filesystem listing and depth-limited expansion
"""

from __future__ import annotations

from .types import Entry
from .classify import (
    DIRECTORY_GLYPH,
    FALLBACK_GLYPH,
    GITIGNORE_GLYPH,
    KIND_TAG_GLYPHS,
    glyph_for,
    kind_tag_for_name,
    size_and_unit,
)
from .fs import DEFAULT_ROOT, MAX_DEPTH, expand, list_directory, parse_depth, walk

__all__ = [
    "Entry",
    "DIRECTORY_GLYPH",
    "FALLBACK_GLYPH",
    "GITIGNORE_GLYPH",
    "KIND_TAG_GLYPHS",
    "glyph_for",
    "kind_tag_for_name",
    "size_and_unit",
    "DEFAULT_ROOT",
    "MAX_DEPTH",
    "expand",
    "list_directory",
    "parse_depth",
    "walk",
]
