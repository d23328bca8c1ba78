"""Structured Logging — one JSON line per record for the API and the seed command.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Write logs carry entity/entity_id; repository failures add operation;
      the global error handlers add error_code and path
    - Extras set to None are omitted, never serialized as null
    - setup_logging is idempotent: calling it again replaces its own handler

Design Decisions:
    - stdlib logging + json: records are plain LogRecords, so uvicorn and
      SQLAlchemy loggers flow through the same handler
    - "text" format for local runs, "json" for anything shipped to a collector
"""

import logging
import json
from datetime import datetime, timezone

ACADEMIA_LOG_FIELDS = ("entity", "entity_id", "operation", "error_code", "path")

_HANDLER_NAME = "academia"


class JSONFormatter(logging.Formatter):
    """Render a record and its known extras as a JSON object."""

    def __init__(self, extra_fields: tuple[str, ...] = ACADEMIA_LOG_FIELDS):
        super().__init__()
        self.extra_fields = extra_fields

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in self.extra_fields
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the academia handler on the root logger and return it."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
