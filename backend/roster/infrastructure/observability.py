"""Structured Logging — JSON or plain-text log lines for the roster API.

Invariants:
    - Every line carries the event time (record.created, UTC), level, logger, message
    - Roster extras (user_id, username, operation, status_code, error_code, path,
      record_count) appear only when set
    - setup_logging is idempotent: repeated lifespans never stack handlers

Design Decisions:
    - stdlib logging with a small formatter, no logging dependency
    - httpx request lines demoted to WARNING: the store client logs its own failures
"""

import logging
import json
from datetime import datetime, timezone

ROSTER_EXTRA_KEYS = (
    "user_id", "username", "operation", "status_code",
    "error_code", "path", "record_count",
)

_NOISY_LOGGERS = ("httpx", "httpcore")


def roster_extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in ROSTER_EXTRA_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **roster_extras(record),
        }
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with roster extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        extras = roster_extras(record)
        if extras:
            text += " " + " ".join(f"{k}={v}" for k, v in extras.items())
        return text


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the roster handler on the root logger, replacing a previous one."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_roster_handler", False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._roster_handler = True
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
