"""Pure display attributes derived from an entry's name and metadata.

Nothing here touches the filesystem: glyphs come from the kind tag, sizes from
``size_bytes`` observed when the entry was listed.
"""

from __future__ import annotations

from .types import Entry

DIRECTORY_GLYPH = ""
GITIGNORE_GLYPH = ""
FALLBACK_GLYPH = ""

# Nerd Font code points.
KIND_TAG_GLYPHS: dict[str, str] = {
    "py": "",
    "rs": "",
    "toml": "",
    "lock": "\U000f033e",
    "go": "\U000f07d3",
    "json": "",
}

KILOBYTE = 1024


def kind_tag_for_name(name: str, is_directory: bool = False) -> str:
    """Return the suffix after the last ``.`` of ``name``.

    Names without a dot yield the whole name. Hidden names (leading dot) and
    directories always yield ``""``, so ``.env.local`` has no tag.
    """
    if is_directory:
        return ""
    base = name.rsplit("/", 1)[-1]
    if base.startswith("."):
        return ""
    return base.rsplit(".", 1)[-1]


def glyph_for(entry: Entry) -> str:
    """Return the icon glyph for ``entry``."""
    if entry.is_directory:
        return DIRECTORY_GLYPH
    if entry.name == ".gitignore":
        return GITIGNORE_GLYPH
    return KIND_TAG_GLYPHS.get(entry.kind_tag, FALLBACK_GLYPH)


def size_and_unit(entry: Entry) -> tuple[int, str]:
    """Return ``(value, unit)``; sizes above 1024 bytes truncate to whole KB."""
    if entry.size_bytes > KILOBYTE:
        return entry.size_bytes // KILOBYTE, "KB"
    return entry.size_bytes, "B"


__all__ = [
    "DIRECTORY_GLYPH",
    "GITIGNORE_GLYPH",
    "FALLBACK_GLYPH",
    "KIND_TAG_GLYPHS",
    "kind_tag_for_name",
    "glyph_for",
    "size_and_unit",
]
