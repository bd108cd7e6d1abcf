"""
Logging configuration.

Two output shapes:
- console: human-readable lines for local development
- json: one JSON object per line for log aggregation

Configured once at application start via configure_logging().
Modules only ever call logging.getLogger(__name__).
"""

import json
import logging
import logging.config
from datetime import datetime, timezone

from erp_ledger.config import get_settings


class JsonFormatter(logging.Formatter):
    """Render a log record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logging_config(level: str, log_format: str) -> dict:
    """Build a dictConfig mapping for the requested level and format."""
    if log_format == "json":
        formatters = {"default": {"()": JsonFormatter}}
    else:
        formatters = {
            "default": {
                "format": "[{asctime}] {levelname} {name} {message}",
                "style": "{",
            },
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "erp_ledger": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }


def configure_logging() -> None:
    """Apply the logging configuration from application settings."""
    settings = get_settings()
    logging.config.dictConfig(
        get_logging_config(settings.LOG_LEVEL.upper(), settings.LOG_FORMAT)
    )
