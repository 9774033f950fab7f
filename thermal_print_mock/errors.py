"""
Service Errors
==============

Errors raised by route handlers. Each carries the HTTP status it maps to;
the application converts them to JSON error responses.
"""

from .config import ERR_INTERNAL, ERR_NOT_CONFIGURED


class PrintServiceError(Exception):
    """Base class for errors reported to the caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'status': 'error', 'error': self.message}


class ValidationError(PrintServiceError):
    """A required request field is missing."""

    status_code = 400


class NotConfiguredError(PrintServiceError):
    """Printing was requested before a printer was configured."""

    status_code = 400

    def __init__(self, message: str = ERR_NOT_CONFIGURED):
        super().__init__(message)


class InternalError(PrintServiceError):
    """Unexpected failure; the message is generic, details stay in the log."""

    status_code = 500

    def __init__(self, message: str = ERR_INTERNAL):
        super().__init__(message)
