"""
Design (observability.py)
- Purpose: One-call logging setup for the command-line front end.
- Inputs: Level name and format ("text" or "json").
- Outputs: None.
- Side effects: Replaces the root logger's handlers with a single stderr handler.
- Thread-safety: Call once at startup.

Storage and operations attach `path`, `record_id` and `error_code` to their log
calls via `extra=`; the JSON formatter lifts them into the output object.
"""

import json
import logging
from datetime import datetime, timezone

from .config import LOG_FORMAT, LOG_LEVEL, LOG_TEXT_FORMAT

LOG_EXTRA_FIELDS = ("path", "record_id", "error_code")


class JSONFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message and any known extras."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in LOG_EXTRA_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> None:
    """Route all tracker logs to stderr in the chosen format; unknown levels mean WARNING."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else logging.Formatter(LOG_TEXT_FORMAT))
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
