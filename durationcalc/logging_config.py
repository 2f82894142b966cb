"""JSON log lines on stderr, for the --verbose trace of parsing and summing."""

import logging
import sys
from typing import Any

import orjson
from typing_extensions import override

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_FIELDS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key in _RECORD_FIELDS or key.startswith("_") or key in payload:
                continue
            try:
                orjson.dumps(value)
                payload[key] = value
            except orjson.JSONEncodeError:
                payload[key] = repr(value)
        return orjson.dumps(payload).decode()


def configure_logging(level: str = "WARNING") -> None:
    """Send log records for the package to stderr as JSON lines."""
    logging.captureWarnings(True)
    root = logging.getLogger()
    root.setLevel(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)
