"""
Logging setup for the service handler and the CLI.

Library modules only create `logging.getLogger(__name__)` loggers; this is
the one place handlers get attached. JSON mode writes one object per line
with no colour codes, which is what hosted log collectors expect.
"""

from __future__ import annotations

import json
import logging
import sys

PACKAGE_LOGGER = "wordle_guesser"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(level: str = "INFO", json_lines: bool = False) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling it again replaces the previous handler instead of stacking a new one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    if json_lines:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
