from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..attendance.model import AttendanceRecord


@dataclass(frozen=True)
class DecodedPayload:
    """Whatever could be recovered from scanned or pasted text."""

    token: Optional[str] = None
    staff_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.token and not self.staff_id

    def apply_to(self, form: "CheckinForm") -> "CheckinForm":
        """Fill the form with decoded values; fields that did not decode stay as they were."""
        return replace(
            form,
            token=self.token or form.token,
            staff_id=self.staff_id or form.staff_id,
        )


@dataclass(frozen=True)
class CheckinForm:
    token: str = ""
    staff_id: str = ""


@dataclass(frozen=True)
class CheckinResult:
    message: str
    created: bool
    record: Optional[AttendanceRecord] = None


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    message: str
