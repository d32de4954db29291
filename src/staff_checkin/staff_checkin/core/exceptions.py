from __future__ import annotations

from .enums import ErrorCategory


class DomainError(Exception):
    """Base exception for business rule violations."""

    category = ErrorCategory.BAD_REQUEST


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class InvalidTokenError(ValidationError):
    """Base for check-in token problems. Recoverable by scanning again."""


class InvalidTokenFormatError(InvalidTokenError):
    """Token does not split into `<random>.<timestamp>`."""


class InvalidTokenTimestampError(InvalidTokenError):
    """Timestamp part of the token is not a base-36 integer."""


class TokenExpiredError(InvalidTokenError):
    """Token is older than the server TTL, or issued in the future."""


class StaffNotFoundError(DomainError):
    """Staff id is not present in the staff directory."""

    category = ErrorCategory.NOT_FOUND


class PersistenceError(DomainError):
    """Underlying store failure. Carries the store's own message."""

    category = ErrorCategory.SERVER_ERROR


class DuplicateAttendanceError(PersistenceError):
    """Insert rejected by the one-record-per-staff-per-day constraint."""
