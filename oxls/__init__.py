"""Public package surface for oxls.

Exports ``main`` for programmatic CLI invocation.
The listing model lives in ``oxls.file_tree_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
