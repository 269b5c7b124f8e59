"""Unit tests for log formatting."""

import json
import logging

from adsradar.core.logging import JSONExtrasFormatter, setup_logging


def test_formatter_appends_extras_as_json() -> None:
    record = logging.makeLogRecord(
        {
            "name": "adsradar.services.search.orchestrator",
            "levelname": "INFO",
            "msg": "City match result",
            "found": "São Paulo",
            "score": 1.0,
        }
    )

    line = JSONExtrasFormatter().format(record)

    head, extras = line.split(" {", 1)
    assert head.endswith("| adsradar.services.search.orchestrator | City match result")
    assert json.loads("{" + extras) == {"found": "São Paulo", "score": 1.0}


def test_formatter_without_extras_has_no_json() -> None:
    record = logging.makeLogRecord({"name": "adsradar", "levelname": "INFO", "msg": "Starting"})

    assert JSONExtrasFormatter().format(record).endswith("| adsradar | Starting")


def test_setup_logging_is_idempotent() -> None:
    logger = logging.getLogger("adsradar")
    original_handlers = list(logger.handlers)
    original_level = logger.level
    logger.handlers.clear()
    try:
        setup_logging("debug")
        setup_logging("debug")

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
    finally:
        logger.handlers[:] = original_handlers
        logger.setLevel(original_level)
        logger.propagate = True
