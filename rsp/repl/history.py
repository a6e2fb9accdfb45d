"""Persistent REPL history through `readline`."""
from __future__ import annotations

import logging
from pathlib import Path

from rsp.config import get_history_path

logger = logging.getLogger(__name__)

HISTORY_LENGTH = 1000

try:
    import readline
except ImportError:  # not available on every platform
    readline = None


def load_history(path: Path | None = None) -> Path | None:
    """Load history from `path` into readline; returns the path in use."""
    if readline is None:
        logger.warning("readline is not available, history is disabled")
        return None
    path = path or get_history_path()
    readline.set_history_length(HISTORY_LENGTH)
    if path.exists():
        try:
            readline.read_history_file(str(path))
        except OSError as e:
            logger.warning("Could not read history from %s: %s", path, e)
    return path


def save_history(path: Path | None) -> None:
    if readline is None or path is None:
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        readline.write_history_file(str(path))
    except OSError as e:
        logger.warning("Could not write history to %s: %s", path, e)
