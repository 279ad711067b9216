"""Structured JSON logging for mdnotion.

Each record is written as one JSON object per line::

    {"ts": "2026-10-18T12:00:00.123456+00:00", "level": "INFO",
     "logger": "mdnotion.uploader", "message": "page created",
     "op": "upload_markdown", "page_id": "abc123", "blocks": 12}

Structured fields travel in ``extra={"extra_fields": {...}}``; the
:func:`fields` helper builds that mapping::

    from mdnotion.observability import fields, get_logger

    log = get_logger("mdnotion.uploader")
    log.info("page created", extra=fields(op="upload_markdown", page_id="abc"))
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Caller-supplied ``extra_fields`` are merged into the top
    level; ``exception`` and ``stack_info`` appear when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def fields(**values: Any) -> dict[str, dict[str, Any]]:
    """Wrap keyword arguments for the ``extra=`` parameter of a log call."""
    return {"extra_fields": values}


# One handler per configured name so repeated ``get_logger`` calls never
# stack duplicate handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "mdnotion",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Module loggers use ``"mdnotion.<module>"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive name such as
        ``"INFO"``.  Only applied the first time *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The logger, with a :class:`StructuredFormatter` handler attached and
        propagation disabled.
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
