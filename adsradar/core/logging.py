"""Logging setup: one readable line per record, structured extras as JSON."""

import json
import logging
import sys

from adsradar.config import settings


class JSONExtrasFormatter(logging.Formatter):
    """Render `extra={...}` fields as a trailing JSON object.

    Output format:
        2026-01-15 10:30:45 | INFO     | adsradar.services.search.orchestrator | City match {"found": "Natal"}
    """

    RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        timestamp = self.formatTime(record, self.datefmt)
        line = f"{timestamp} | {record.levelname:<8} | {record.name} | {record.message}"

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.RESERVED_ATTRS and not key.startswith("_")
        }
        if extras:
            try:
                line = f"{line} {json.dumps(extras, default=str, ensure_ascii=False)}"
            except (TypeError, ValueError):
                pass

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"

        return line


def setup_logging(level: str | None = None) -> None:
    """Attach a stdout handler to the package logger (idempotent)."""
    logger = logging.getLogger("adsradar")
    logger.setLevel((level or settings.log_level).upper())

    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONExtrasFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    # Uvicorn installs its own root handlers.
    logger.propagate = False
