"""
config/logging_config.py
────────────────────────
Process-wide logging setup.

Log calls may pass context through ``extra=``; the keys listed in
``_EXTRA_KEYS`` are appended to the line as ``key=value`` pairs.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from logging.config import dictConfig

from config.settings import settings

_EXTRA_KEYS = (
    "feed_path",
    "state",
    "version",
    "status_code",
    "url",
    "reason",
)

_configured = False


class ContextualFormatter(logging.Formatter):

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _EXTRA_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = [
            f"{key}={getattr(record, key)}"
            for key in self._extra_keys
            if getattr(record, key, None) is not None
        ]
        if context:
            return f"{message} | {' '.join(context)}"
        return message


def configure_logging(level: str | int | None = None) -> None:
    """Configure root logging once; later calls are no-ops."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else settings.LOG_LEVEL

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "config.logging_config.ContextualFormatter",
                    "fmt": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "style": "%",
                    "extra_keys": list(_EXTRA_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "level": log_level,
                    "formatter": "contextual",
                }
            },
            "root": {"handlers": ["default"], "level": log_level},
        }
    )

    _configured = True
