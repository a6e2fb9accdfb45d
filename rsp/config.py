from __future__ import annotations
import logging
import os
from pathlib import Path

# File suffix of on-disk modules; appended to `require` specifiers lacking it
MODULE_SUFFIX = ".lisp"

_DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """Log level from RSP_LOG (a level name such as DEBUG); WARNING if unset or unknown."""
    raw = os.environ.get("RSP_LOG", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def _data_dir() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def get_history_path() -> Path:
    raw = os.environ.get("RSP_HISTORY_PATH")
    if raw:
        return Path(raw)
    return _data_dir() / "rsp" / "history.txt"
