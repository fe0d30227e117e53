"""
Logging setup for the to-do API.

``setup_logging`` installs at most one console handler and one file
handler per log file on the root logger.  Handlers it creates carry a
``todo_api.`` name, so repeated ``create_app`` calls (the test suite
builds a fresh app per test) never stack duplicates, while handlers
added by uvicorn or pytest are left alone.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "todo_api.console"
FILE_HANDLER_PREFIX = "todo_api.file:"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the API.

    ``level`` is a level name such as ``"debug"`` (unknown names mean
    ``INFO``).  ``logfile``, when given, also sends records to that
    file, resolved against the current working directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_name = FILE_HANDLER_PREFIX + str(log_path)
        if not _has_handler(root, file_name):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(file_name)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)
