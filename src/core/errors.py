"""
Custom exceptions and error handling for the bookings API.

Defines application-specific exceptions with error codes so every handler
reports failures the same way.

Usage:
    from core.errors import PersistenceError, ErrorCode

    raise PersistenceError("put_item failed", code=ErrorCode.PERSISTENCE_FAILED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # Storage errors
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "Your request is missing required information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.PERSISTENCE_FAILED: "We could not reach the booking store. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class BookingApiError(Exception):
    """Base exception for all bookings API errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(BookingApiError):
    """Request body failed presence checks or could not be decoded."""

    pass


class PersistenceError(BookingApiError):
    """A read or write against the document store failed."""

    pass
