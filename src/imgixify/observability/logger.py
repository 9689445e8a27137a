"""Structured JSON logging for imgixify.

Each record is written as one JSON object per line::

    {"ts": "2026-10-19T08:00:00.000000+00:00", "level": "DEBUG",
     "logger": "imgixify.builder", "message": "url built",
     "domain": "demo.imgix.net", "path": "photos/cat.jpg", "params": 3}

Structured fields travel through ``extra={"extra_fields": {...}}``.  Fields
that hold an imgix URL (``url``) have their signature redacted on the way
out, so callers may log the URL exactly as the imgix library built it.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from imgixify.utils.redact import redact_url

_URL_FIELDS = frozenset({"url"})


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys: ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Fields from ``extra_fields`` are merged at the top level,
    with signed URLs redacted.  ``exception`` and ``stack_info`` are added
    when the record carries them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields is not None:
            for key, value in extra_fields.items():
                if key in _URL_FIELDS and isinstance(value, str):
                    value = redact_url(value)
                entry[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


# One handler per logger name so repeated get_logger calls stay idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "imgixify",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name, ``"imgixify"`` by default.  Modules use dotted children
        such as ``"imgixify.builder"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive name.  Only
        applied the first time *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a :class:`StructuredFormatter` handler.  Repeated
        calls with the same *name* return the same logger without adding
        handlers.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        resolved_level = (
            logging.getLevelName(level.upper()) if isinstance(level, str) else level
        )
        logger.setLevel(resolved_level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
