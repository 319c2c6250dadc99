"""Command-line front door for oxls.

Parses the target path and depth, walks the directory, and prints the
rendered tree to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import load_default_depth, save_default_depth
from .file_tree_model import DEFAULT_ROOT, parse_depth, walk
from .render import render_entry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oxls",
        description="List directory contents with file-type glyphs and sizes.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to the current directory.")
    parser.add_argument(
        "-d",
        "--depth",
        default=None,
        help="Extra directory levels to expand (default: configured depth, else 0).",
    )
    parser.add_argument(
        "--save-depth",
        action="store_true",
        help="Remember the effective --depth as the default for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped or unreadable paths to stderr.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the listing for the requested path.

    ``--depth`` is parsed leniently: anything that is not a non-negative
    integer means no recursion. An explicit empty path lists nothing.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    depth = parse_depth(args.depth) if args.depth is not None else load_default_depth()
    if args.save_depth:
        save_default_depth(depth)

    entries = walk(DEFAULT_ROOT if args.path is None else args.path, depth)
    for entry in entries:
        sys.stdout.write(render_entry(entry) + "\n")


if __name__ == "__main__":
    main()
