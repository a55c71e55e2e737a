"""Audit trail for scoring runs and application logging setup."""

import json
import logging

from quality_score import config
from quality_score.utils import iso_now


def _ensure_log_dir():
    path = config.log_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def audit_log(
    action: str,
    status: str,
    *,
    model: str | None = None,
    score: float | None = None,
    valid: bool | None = None,
    filename: str | None = None,
    error: str | None = None,
    extra: dict | None = None,
):
    """Append a structured audit entry to the audit log (JSONL)."""
    log_dir = _ensure_log_dir()
    entry = {
        "timestamp": iso_now(),
        "action": action,
        "status": status,
    }
    if model:
        entry["model"] = model
    if score is not None:
        entry["score"] = score
    if valid is not None:
        entry["valid"] = valid
    if filename:
        entry["filename"] = filename
    if error:
        entry["error"] = error
    if extra:
        entry.update(extra)

    with open(log_dir / "audit.log", "a", encoding="utf-8") as f:
        f.write(json.dumps(entry, default=str) + "\n")


def setup_app_logging() -> logging.Logger:
    """
    Attach a console handler (level from QUALITY_SCORE_LOG_LEVEL) and an app.log file
    handler (DEBUG) to the quality_score logger. Library modules only log; the CLI calls this once.
    """
    logger = logging.getLogger("quality_score")
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )
    handlers = [
        (logging.StreamHandler(), config.console_log_level()),
        (logging.FileHandler(_ensure_log_dir() / "app.log", encoding="utf-8"), logging.DEBUG),
    ]
    for handler, level in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
