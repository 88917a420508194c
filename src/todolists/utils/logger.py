"""Rotating file log for command runs.

Records go to ``todolists.log`` in the platform log directory. The handler
is attached once per process; the level follows the ``log_level`` config
key on every call.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from platformdirs import user_log_dir

LOG_FILE = "todolists.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    # 5 MB per file, three rotated files kept.
    handler = RotatingFileHandler(
        log_dir / LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger(level: str = "INFO") -> logging.Logger:
    """Return the application logger set to *level*.

    Args:
        level: Name of a standard logging level, e.g. "DEBUG"
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger("todolists")
        if not logger.handlers:
            logger.addHandler(_file_handler(Path(user_log_dir("todolists"))))
        logger.propagate = False
        _logger = logger
    _logger.setLevel(level)
    return _logger
