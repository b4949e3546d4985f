"""
Logging configuration for the Art Exhibition API.

``setup_logging`` is called by every ``create_app``.  The first call
installs a console handler on the root logger unless something else
(uvicorn, pytest) already did.  Every call applies the requested level
to the root logger and to uvicorn's loggers, so the server's own
messages follow ``Settings.log_level`` as well.  A log file, when
given, gets exactly one handler no matter how many apps are created.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give ``INFO``."""
    numeric_level = logging.getLevelName(level.upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path
        for handler in logger.handlers
    )


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure application and server logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Applied on every call, so a later app with other
        settings changes the level.
    logfile : Optional[str]
        Path of a file to also write log records to, resolved relative
        to the current working directory.

    Returns
    -------
    int
        The numeric level that was applied.
    """
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if not _has_file_handler(root, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    root.setLevel(numeric_level)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
    return numeric_level
