"""Exceptions raised by the CES client."""

from __future__ import annotations


class CESError(Exception):
    """Base class for all client errors."""


class InputValidationError(CESError, ValueError):
    """Raised before any network access when a request input is malformed."""

    def __init__(self, operation: str, slot: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.slot = slot


class APIStatusError(CESError):
    """Raised when the service answers with a status other than 200."""

    def __init__(self, status: int, body: str):
        super().__init__(f"error: Received status code: {status}. Body: {body}")
        self.status = status
        self.body = body


class ResponseDecodeError(CESError):
    """Raised when a successful response body cannot be decoded."""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body
