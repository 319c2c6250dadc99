"""Plain-text tree rendering for listing entries.

Each entry renders as ``<glyph>\\t<size><unit>\\t<name>``; expanded
directories append their children's blocks, each indented by one tab.
"""

from __future__ import annotations

from collections.abc import Iterable

from .file_tree_model.classify import glyph_for, size_and_unit
from .file_tree_model.types import Entry

INDENT = "\t"


def format_entry_line(entry: Entry) -> str:
    """Return the single display line for ``entry``."""
    size, unit = size_and_unit(entry)
    return f"{glyph_for(entry)}\t{size}{unit}\t{entry.name}"


def render_entry(entry: Entry) -> str:
    """Render ``entry`` and, when expanded, its children beneath it.

    Each nesting level adds one leading tab. An expanded directory keeps the
    newline separator even with no children, which shows as an empty line.
    Rendering uses an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit.
    """
    lines: list[str] = []
    pending: list[tuple[Entry, int]] = [(entry, 0)]
    while pending:
        node, level = pending.pop()
        lines.append(INDENT * level + format_entry_line(node))
        if node.children is None:
            continue
        if not node.children:
            lines.append("")
            continue
        pending.extend((child, level + 1) for child in reversed(node.children))
    return "\n".join(lines)


def render_entries(entries: Iterable[Entry]) -> str:
    """Render top-level entries, one block per entry, newline-joined."""
    return "\n".join(render_entry(entry) for entry in entries)


__all__ = ["INDENT", "format_entry_line", "render_entry", "render_entries"]
