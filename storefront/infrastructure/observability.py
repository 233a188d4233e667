"""Structured Logging: JSON formatter and setup for the storefront process.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (slot, product_id, view, error_code, ...) surfaced when present
    - JSON format by default, human-readable when log_format != "json"

Design Decisions:
    - setup_logging called once on startup via the FastAPI lifespan
    - Idempotent: a second call replaces the handler it installed instead of stacking
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "slot", "product_id", "review_id", "view", "error_code", "path", "operation",
)
_HANDLER_NAME = "storefront"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
