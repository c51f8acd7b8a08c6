# models/__init__.py

from .log import LogRecord, FIELDS, PARSE_FAILURE_MARKER

__all__ = [
    "LogRecord",
    "FIELDS",
    "PARSE_FAILURE_MARKER",
]
