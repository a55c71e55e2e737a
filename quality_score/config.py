"""Environment configuration. Values are read at call time so .env and test overrides apply."""

import os
from pathlib import Path

DEFAULT_LOG_DIR = "logs"
DEFAULT_REPORTS_DIR = "artifacts"
TRUTHY = {"1", "true", "yes", "on"}


def log_dir() -> Path:
    return Path(os.environ.get("QUALITY_SCORE_LOG_DIR", DEFAULT_LOG_DIR))


def reports_dir() -> Path:
    return Path(os.environ.get("QUALITY_SCORE_REPORTS_DIR", DEFAULT_REPORTS_DIR))


def show_messages_default() -> bool:
    """QUALITY_SCORE_SHOW_MESSAGES=1|true|yes|on enables per-field messages by default."""
    return os.environ.get("QUALITY_SCORE_SHOW_MESSAGES", "").strip().lower() in TRUTHY


def console_log_level() -> str:
    """QUALITY_SCORE_LOG_LEVEL for the console handler; the app.log file always gets DEBUG."""
    return os.environ.get("QUALITY_SCORE_LOG_LEVEL", "INFO").strip().upper() or "INFO"
