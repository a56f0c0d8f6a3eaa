# src/todo_client/logging_setup.py

"""
Process-wide logging for the console client.

stderr shares the terminal with the rendered task list, so it only carries
this package's records plus loud third-party ones. todo.log under the data
directory gets everything at file_level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "todo.log"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Minimum level a foreign logger needs to reach the terminal, by name prefix.
_CONSOLE_THRESHOLDS: tuple[tuple[str, int], ...] = (
    ("httpx", logging.WARNING),
    ("httpcore", logging.WARNING),
    ("py.warnings", logging.ERROR),
)
_QUIET_LOGGERS = ("httpx", "httpcore")


class _ConsoleNoiseFilter(logging.Filter):
    def __init__(self, own_prefix: str = "todo_client") -> None:
        super().__init__()
        self.own_prefix = own_prefix

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == self.own_prefix or name.startswith(self.own_prefix + "."):
            return True
        for prefix, threshold in _CONSOLE_THRESHOLDS:
            if name.startswith(prefix):
                return record.levelno >= threshold
        return record.levelno >= logging.ERROR


def _make_handler(
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
    *filters: logging.Filter,
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    for f in filters:
        handler.addFilter(f)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Install the stderr and todo.log handlers on the root logger.

    Replaces whatever handlers were there, so calling it again does not
    duplicate output. Returns the log file path.
    """
    log_path = Path(log_dir) / LOG_FILE_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)
    handlers = [
        _make_handler(
            logging.StreamHandler(sys.stderr), console_level, formatter, _ConsoleNoiseFilter()
        ),
        _make_handler(logging.FileHandler(log_path, encoding="utf-8"), file_level, formatter),
    ]

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.setLevel(logging.DEBUG)
    for h in handlers:
        root.addHandler(h)

    logging.captureWarnings(True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return log_path
