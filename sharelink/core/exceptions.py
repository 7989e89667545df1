"""
Custom Exceptions

This module defines the error taxonomy of the short link service.

- InvalidInputError: a required field was missing on create (client error)
- LinkNotFoundError: no record stored under the requested id (client error)
- CorruptRecordError: a record exists but its bytes cannot be read back
- StoreError: the underlying storage engine failed
"""

from typing import Optional


class ShortLinkException(Exception):
    """Base exception for the short link service."""
    pass


class InvalidInputError(ShortLinkException):
    """Raised by the validation gate when a required field is missing or empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Param {field} must be defined")


class LinkNotFoundError(ShortLinkException):
    """Raised when no record is stored under a short id."""

    def __init__(self, short_id: str):
        self.short_id = short_id
        super().__init__(f"Short link '{short_id}' not found")


class CorruptRecordError(ShortLinkException):
    """Raised when stored bytes cannot be deserialized into a link record."""

    def __init__(
        self,
        short_id: Optional[str] = None,
        reason: str = "unreadable record",
        original_error: Optional[Exception] = None,
    ):
        self.short_id = short_id
        self.reason = reason
        self.original_error = original_error
        if short_id is None:
            super().__init__(f"Corrupt record: {reason}")
        else:
            super().__init__(f"Corrupt record under '{short_id}': {reason}")


class StoreError(ShortLinkException):
    """Raised when a storage operation fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Store error: {message}")


class ServiceUnavailableError(ShortLinkException):
    """Raised when a required service is unavailable."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        super().__init__(f"Service '{service_name}' is unavailable")
