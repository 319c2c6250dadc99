"""Filesystem scanning and bounded-depth tree expansion for listing entries.

Every failure degrades to a default: unreadable directories list as empty,
unreadable entries keep zero size, vanished entries are skipped. Nothing here
raises ``OSError`` to callers.
"""

from __future__ import annotations

import logging
import os
import re
from stat import S_ISDIR

from .classify import kind_tag_for_name
from .types import Entry

logger = logging.getLogger(__name__)

DEFAULT_ROOT = "./"
MAX_DEPTH = 2**32 - 1

_DEPTH_RE = re.compile(r"\+?[0-9]+")


def _display_name(raw_name: str) -> str:
    """Return ``raw_name`` or ``""`` when it is not valid UTF-8 text."""
    try:
        raw_name.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return raw_name.rsplit("/", 1)[-1]


def _entry_from_dir_entry(child: os.DirEntry[str]) -> Entry:
    """Build an ``Entry`` for one scandir result, defaulting unreadable metadata."""
    child_path = os.path.abspath(child.path)
    try:
        stat = child.stat()
    except OSError as exc:
        logger.debug("metadata unavailable for %r: %s", child_path, exc)
        is_directory = False
        size_bytes = 0
    else:
        is_directory = S_ISDIR(stat.st_mode)
        size_bytes = max(0, int(stat.st_size))

    name = _display_name(child.name)
    return Entry(
        name=name,
        path=child_path,
        kind_tag=kind_tag_for_name(name, is_directory),
        is_directory=is_directory,
        size_bytes=size_bytes,
    )


def list_directory(path: str | os.PathLike[str]) -> list[Entry]:
    """List the immediate children of ``path`` in enumeration order.

    Files, missing paths, invalid paths, and unreadable directories all yield
    ``[]``. Returned entries are never expanded.
    """
    if os.path.isfile(path):
        return []

    try:
        scanner = os.scandir(path)
    except (OSError, ValueError) as exc:
        logger.debug("cannot list %r: %s", path, exc)
        return []

    entries: list[Entry] = []
    with scanner:
        try:
            for child in scanner:
                entries.append(_entry_from_dir_entry(child))
        except OSError as exc:
            # readdir failures are not resumable; keep what was read.
            logger.debug("listing of %r ended early: %s", path, exc)
    return entries


def expand(entry: Entry, depth: int) -> None:
    """Attach ``entry``'s listing as children, then ``depth`` more levels below.

    Non-directories are left unexpanded. Directories always receive a list,
    even when it is empty. Expansion is depth-first, left to right, driven by
    an explicit stack so tree depth is not limited by the interpreter stack.
    Symlink loops are bounded only by ``depth``.
    """
    pending: list[tuple[Entry, int]] = [(entry, depth)]
    while pending:
        node, remaining = pending.pop()
        if not node.is_directory:
            continue
        children = list_directory(node.path)
        node.set_children(children)
        if remaining > 0:
            pending.extend((child, remaining - 1) for child in reversed(children))


def parse_depth(value: object) -> int:
    """Coerce user-supplied depth into an unsigned 32-bit int, defaulting to ``0``.

    Only ASCII digit strings (optionally prefixed by ``+``) are accepted; minus
    signs, whitespace, underscores, and out-of-range values all mean ``0``.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if 0 <= value <= MAX_DEPTH else 0
    if not isinstance(value, str) or not _DEPTH_RE.fullmatch(value):
        return 0
    parsed = int(value)
    return parsed if parsed <= MAX_DEPTH else 0


def walk(root: str | os.PathLike[str] | None = None, depth: object = 0) -> list[Entry]:
    """List ``root`` and expand each top-level directory ``depth`` levels.

    ``root`` defaults to the current directory when omitted; an empty string
    is not a directory and lists nothing. With depth ``0`` only the top-level
    listing is produced.
    """
    entries = list_directory(DEFAULT_ROOT if root is None else root)
    levels = parse_depth(depth)
    if levels > 0:
        for entry in entries:
            expand(entry, levels)
    return entries


__all__ = [
    "DEFAULT_ROOT",
    "MAX_DEPTH",
    "list_directory",
    "expand",
    "parse_depth",
    "walk",
]
