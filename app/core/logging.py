from __future__ import annotations

import logging
from logging.config import dictConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Request context attached through ``extra=`` by the services and the store.
CONTEXT_KEYS = (
    "user_id",
    "username",
    "bucket",
    "resolution",
    "start",
    "count",
    "row_count",
    "reason",
)

_configured = False


class ContextualFormatter(logging.Formatter):
    """Appends whichever ``CONTEXT_KEYS`` a record carries as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_KEYS
            if getattr(record, key, None) is not None
        )
        return f"{message} | {context}" if context else message


def configure_logging(level: str | int = "INFO") -> None:
    global _configured
    if _configured:
        return

    level_name = logging.getLevelName(level) if isinstance(level, int) else level.upper()
    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "usage": {
                    "()": ContextualFormatter,
                    "fmt": LOG_FORMAT,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "usage",
                }
            },
            "root": {"handlers": ["console"], "level": level_name},
        }
    )
    _configured = True
