"""Structured logging for report generation runs.

Every record written to the log file is one JSON object. Report context
passed through ``extra`` (event, path, page and row counts) comes right after
the standard fields, in a fixed order, so runs can be diffed line by line.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from config.settings import get_log_dir

LOG_FILE_NAME = "employee_reports.log"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Report context keys, written in this order when present
REPORT_FIELDS = ("event", "path", "file", "department", "pages", "rows", "reports", "count", "line", "seconds")

_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

_ACTIVE_LOG_FILE: Optional[Path] = None
_INSTALLED: list[logging.Handler] = []


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: standard fields, report fields, then the rest."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key in REPORT_FIELDS:
            if key in context:
                payload[key] = context.pop(key)
        payload.update(sorted(context.items()))

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def default_log_file() -> Path:
    """Log file used when setup_logging is called without an explicit path."""
    return get_log_dir() / LOG_FILE_NAME


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console_level: int = logging.WARNING,
) -> Path:
    """Send records to the JSON log file and warnings to the console.

    Runs once per process; later calls return the active log file. Handlers
    installed by other code (test capture, for one) are left in place.
    """
    global _ACTIVE_LOG_FILE

    if _ACTIVE_LOG_FILE is not None:
        return _ACTIVE_LOG_FILE

    target = log_file or default_log_file()
    target.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(target, encoding="utf-8")
    file_handler.setFormatter(StructuredFormatter())
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    for handler in _INSTALLED:
        root.removeHandler(handler)
        handler.close()
    _INSTALLED[:] = [file_handler, console_handler]
    for handler in _INSTALLED:
        root.addHandler(handler)

    _ACTIVE_LOG_FILE = target
    return target
