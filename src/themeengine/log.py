"""
Logging setup for applications and the command line.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
and formatting are configured here.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

LOGGER_NAME = 'themeengine'


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)
        return json.dumps(log_entry, default=str)


class StructuredFormatter(logging.Formatter):
    """Human-readable formatter"""

    def __init__(self, fmt=None, datefmt=None):
        if fmt is None:
            fmt = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        super().__init__(fmt, datefmt)


def configure_logging(level: str = 'WARNING', fmt: str = 'structured',
                      stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single console handler to the package logger"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if fmt == 'json' else StructuredFormatter())
    logger.addHandler(handler)
    return logger
