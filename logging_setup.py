"""Structured JSON logging for the ``htmlutil`` logger.

The library modules only call ``logging.getLogger("htmlutil")``; an
application opts into JSON-lines output by calling
``configure_logging()`` once at startup.
"""

import json
import logging
import os
from typing import Optional

LOGGER_NAME = "htmlutil"

# Optional ``extra=`` fields copied into each JSON record.
EXTRA_FIELDS = ("tag", "attr", "removed")


class StructuredFormatter(logging.Formatter):
    """JSON-lines formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                log_data[key] = val
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def configure_logging(
    level: Optional[str] = None, stream=None
) -> logging.Logger:
    """Attach a JSON handler to the ``htmlutil`` logger and return it.

    *level* defaults to ``HTMLUTIL_LOG_LEVEL`` (else ``INFO``).  Calling
    this again replaces the previously installed handler.
    """
    if level is None:
        level = os.getenv("HTMLUTIL_LOG_LEVEL", "INFO")

    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        if isinstance(old.formatter, StructuredFormatter):
            logger.removeHandler(old)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False
    return logger
