"""Logging setup with a JSON formatter for decode diagnostics."""

import json
import logging
from datetime import datetime, timezone

from canvas_jsonapi.config import Settings, get_settings

EXTRA_FIELDS = ("resource_type", "resource_id", "error_code", "key", "identifier")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Attach a stream handler to the ``canvas_jsonapi`` logger."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        ))
    package_logger = logging.getLogger("canvas_jsonapi")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Apply ``settings`` (or the environment settings) to package logging."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
