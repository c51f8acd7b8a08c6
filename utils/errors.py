"""
utils/errors.py
-----------------
Errors raised while building queries and reading presence logs.
"""


class LogViewError(Exception):
    """Base class for every error the service reports."""


class ConfigurationError(LogViewError):
    pass


class InvalidParameter(LogViewError):
    def __init__(self, name, value):
        self.name = name
        self.value = value
        if value is None:
            message = f"missing query parameter '{name}'"
        else:
            message = f"query parameter '{name}' must be a 64-bit integer, got {value!r}"
        super().__init__(message)


class StoreUnavailable(LogViewError):
    def __init__(self, operation, cause):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class DecodeFailure(LogViewError):
    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(
            f"field '{field}' holds {type(value).__name__}, expected a string"
        )


class TimestampParseFailure(LogViewError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"not an RFC3339 timestamp: {value!r}")
