"""Application logging configuration helpers."""
from __future__ import annotations

import json
import logging
from logging.config import dictConfig
from typing import Any

from .config import LoggingConfig, settings

_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime", "taskName"}


def _json_formatter(record: logging.LogRecord) -> str:
    payload: dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
    if extra:
        payload.update(extra)
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    return json.dumps(payload, ensure_ascii=False, default=str)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - overrides base
        return _json_formatter(record)


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure global logging based on settings."""

    config = config or settings.logging
    formatter: dict[str, Any] = {"()": JsonFormatter} if config.json_logs else {"format": "%(levelname)s %(name)s %(message)s"}

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": formatter},
            "handlers": {
                "default": {
                    "level": config.level,
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "loggers": {
                "": {
                    "handlers": ["default"],
                    "level": config.level,
                }
            },
        }
    )
