"""Domain datatype for filesystem-backed listing entries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class Entry:
    """One observed filesystem object plus its lazily attached children.

    Observed attributes are frozen. ``children`` is ``None`` until
    :func:`oxls.file_tree_model.fs.expand` lists the directory; after that it
    is a list, possibly empty.
    """

    name: str
    path: str
    kind_tag: str = ""
    is_directory: bool = False
    size_bytes: int = 0
    children: list["Entry"] | None = field(default=None, repr=False)

    def set_children(self, children: list["Entry"]) -> None:
        """Record the listing of this directory; non-directories are rejected."""
        if not self.is_directory:
            raise ValueError(f"{self.path!r} is not a directory")
        object.__setattr__(self, "children", children)

    def __str__(self) -> str:
        from ..render import render_entry

        return render_entry(self)


__all__ = ["Entry"]
