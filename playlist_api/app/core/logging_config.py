"""
Logging configuration for the Playlist API.

``setup_logging`` applies ``LOG_LEVEL`` to the root logger and to the
uvicorn loggers, so server and access messages go through the same
handlers and format as the application's own records.  A console
handler is only attached when nothing else (pytest, an embedding
program) has configured the root logger yet; ``LOG_FILE`` always gets
its file handler.  Calling it again, e.g. from a second ``create_app``,
updates the level without duplicating handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "playlist_api.console"
FILE_HANDLER_PREFIX = "playlist_api.file:"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name to its number; unknown names mean ``INFO``."""
    numeric_level = logging.getLevelName(str(level).upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root and uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to, resolved against the
        current working directory.  If omitted, no file handler is
        added.
    """
    numeric_level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        name = FILE_HANDLER_PREFIX + str(log_path)
        if not _has_handler(root, name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    # run.py starts uvicorn without its own logging config; its records
    # reach the root handlers above.
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.setLevel(numeric_level)
        uvicorn_logger.propagate = True
