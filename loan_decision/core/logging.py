"""Structured JSON Logging Configuration.

All logs are output as JSON with the current request_id attached. Personal
codes passed through ``extra`` are masked by the formatter, so call sites may
log them as-is.
"""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger import jsonlogger

from ..utils import generate_request_id, sanitize_log_data
from .config import settings

request_id_var: ContextVar[str] = ContextVar('request_id', default='no-request-id')


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding request_id and source location, masking personal codes."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        log_record.update(sanitize_log_data(dict(log_record)))

        log_record['timestamp'] = record.created
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['request_id'] = request_id_var.get()

        log_record['file'] = record.filename
        log_record['line'] = record.lineno
        log_record['function'] = record.funcName

        log_record['process_id'] = record.process
        log_record['thread_id'] = record.thread


def setup_logging(level: str | None = None) -> logging.Logger:
    """Install the JSON handler on the root logger.

    Args:
        level: Log level name (defaults to settings.LOG_LEVEL)

    Returns:
        The root logger
    """
    level = (level or settings.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    root_logger.addHandler(handler)

    root_logger.info(
        "Logging configured",
        extra={
            'log_level': level,
            'environment': settings.ENVIRONMENT
        }
    )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_request_id(request_id: str | None = None) -> str:
    """Set the request ID for the current context, generating one if not provided."""
    if request_id is None:
        request_id = generate_request_id()
    request_id_var.set(request_id)
    return request_id


def get_request_id() -> str:
    return request_id_var.get()
