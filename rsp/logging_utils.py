from __future__ import annotations
import logging

from rsp.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def init_logging(level: int | str | None = None) -> None:
    """Configure the root logger once for application use.

    Without an explicit level the RSP_LOG environment variable decides.
    """
    if level is None:
        level = get_log_level()
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("rsp").setLevel(level)
