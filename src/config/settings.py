"""Environment helpers for runtime configuration."""

import os
from functools import lru_cache
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_OUTPUT_DIR = "generated_reports"
DEFAULT_LOG_DIR = PROJECT_ROOT / "data" / "logs"

_TRUTHY = {"dev", "development", "1", "true", "yes"}


@lru_cache
def is_dev_mode() -> bool:
    """Return True when the app runs in development mode."""
    value = os.environ.get("EMPLOYEE_REPORTS_ENV") or os.environ.get("EMPLOYEE_REPORTS_DEV_MODE")
    if not value:
        return False
    normalized = value.strip().lower()
    return normalized in _TRUTHY


@lru_cache
def is_perf_debug() -> bool:
    """Return True when function timing should be logged."""
    return os.environ.get("EMPLOYEE_REPORTS_PERF_DEBUG", "0").strip() == "1"


def get_output_dir() -> Path:
    """Directory generated reports are written to."""
    return Path(os.environ.get("EMPLOYEE_REPORTS_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR)


def get_log_dir() -> Path:
    """Directory holding the structured log file."""
    raw = os.environ.get("EMPLOYEE_REPORTS_LOG_DIR")
    return Path(raw) if raw else DEFAULT_LOG_DIR


__all__ = ["is_dev_mode", "is_perf_debug", "get_output_dir", "get_log_dir"]
