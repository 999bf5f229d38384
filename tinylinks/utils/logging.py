"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` in the entry point (handler module or CLI)
before any other logging is done.

Every record is rendered as one JSON object. `extra={...}` fields are merged
next to the core fields, e.g.:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "tinylinks.services.short_link_service",
    "message": "Minted new short link.",
    "shortcode": "1"
}

Records logged with `exc_info` (e.g. `logger.exception(...)`) also carry an
"exception" field holding the formatted traceback.
"""

import os
import json
import logging
import logging.config
import time
from typing import Any

from tinylinks.constants import ENV


# Attributes every LogRecord has, i.e. everything that didn't come from `extra`
RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render LogRecords (including their `extra` fields) as JSON documents"""

    converter = time.gmtime
    msec_format = '%s.%03dZ'

    def __init__(self) -> None:
        super().__init__(datefmt='%Y-%m-%dT%H:%M:%S')

    def to_dict(self, record: logging.LogRecord) -> dict[str, Any]:
        document = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            document['exception'] = self.formatException(record.exc_info)
        if record.stack_info:
            document['stack'] = self.formatStack(record.stack_info)

        for key, value in vars(record).items():
            # core fields win over colliding extras
            if key not in RESERVED_ATTRS and key not in document:
                document[key] = value
        return document

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.to_dict(record), default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        seconds = super().formatTime(record, datefmt)
        return self.msec_format % (seconds, int(record.created * 1000) % 1000)


def logging_config(level: str, stream: str) -> dict[str, Any]:
    """Return the `dictConfig` document routing the root logger through JsonFormatter"""
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'json': {'()': JsonFormatter}},
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'json',
                'stream': stream,
            }
        },
        'root': {'level': level, 'handlers': ['console']},
    }


def initialize_logging(stream: str = 'ext://sys.stdout') -> None:
    """Configure JSON logging on the root logger

    The level comes from the LOG_LEVEL environment variable (INFO by default).
    The CLI passes 'ext://sys.stderr' so command output owns stdout.
    """
    level = os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
    logging.config.dictConfig(logging_config(level, stream))
