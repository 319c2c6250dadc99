"""Persistent JSON config helpers.

Stores the default recursion depth used when ``--depth`` is not given.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_PATH = Path.home() / ".config" / "oxls.json"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("config not loaded from %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and ignored so a read-only home directory
    never breaks a listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("config not saved to %s: %s", CONFIG_PATH, exc)


def _coerce_nonnegative_int(value: object) -> int:
    """Booleans and non-integers are treated as invalid and coerced to ``0``."""
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(0, value)


def load_default_depth() -> int:
    """Return the persisted default depth, or ``0`` when unset or invalid."""
    return _coerce_nonnegative_int(load_config().get("default_depth", 0))


def save_default_depth(depth: int) -> None:
    """Persist ``depth`` as the default, clamped non-negative."""
    config = load_config()
    config["default_depth"] = _coerce_nonnegative_int(depth)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "save_config",
    "load_default_depth",
    "save_default_depth",
]
