from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status values as stored in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
    ON_LEAVE = "On Leave"


class ErrorCategory(str, Enum):
    """How a domain error is reported to the caller."""

    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"

    @property
    def http_status(self) -> int:
        return {
            ErrorCategory.BAD_REQUEST: 400,
            ErrorCategory.NOT_FOUND: 404,
            ErrorCategory.SERVER_ERROR: 500,
        }[self]
