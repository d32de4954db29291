from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from ..attendance.repository import AttendanceStore
from ..common.datetime_utils import as_utc, now_utc, utc_day_bounds
from ..common.validators import normalize_staff_id
from ..core.constants import CHECKIN_TOKEN_TTL_SECONDS, MSG_ALREADY_CHECKED_IN, MSG_ATTENDANCE_RECORDED
from ..core.enums import AttendanceStatus
from ..core.exceptions import (
    DomainError,
    DuplicateAttendanceError,
    PersistenceError,
    StaffNotFoundError,
    TokenExpiredError,
    ValidationError,
)
from ..staff.repository import StaffDirectory
from .model import CheckinResult, SubmitResult
from .token import CheckinToken, parse_token

logger = logging.getLogger(__name__)


class CheckinService:
    """Authoritative accept/reject decision for a QR check-in.

    Gates run in order and stop at the first failure:
    input -> token format -> freshness -> staff lookup -> same-day duplicate -> insert.
    """

    def __init__(
        self,
        staff: StaffDirectory,
        attendance: AttendanceStore,
        *,
        ttl_seconds: int = CHECKIN_TOKEN_TTL_SECONDS,
    ):
        self._staff = staff
        self._attendance = attendance
        self._ttl = timedelta(seconds=int(ttl_seconds))

    @property
    def ttl_ms(self) -> int:
        return self._ttl // timedelta(milliseconds=1)

    def check_in(self, staff_id: Optional[str], token: Optional[str], *, now: Optional[datetime] = None) -> CheckinResult:
        now = as_utc(now) if now else now_utc()

        if not staff_id or not str(staff_id).strip() or not token or not str(token).strip():
            raise ValidationError("Missing staffId or token")

        parsed = parse_token(str(token).strip())
        self._ensure_fresh(parsed, now)

        normalized = normalize_staff_id(staff_id)
        staff = self._staff.find_by_normalized_id(normalized)
        if not staff:
            raise StaffNotFoundError(
                f"Staff ID not found: {normalized}. Please complete onboarding or use the correct ID."
            )

        start, end = utc_day_bounds(now)
        existing = self._attendance.find_by_staff_and_date_range(normalized, start, end)
        if existing:
            logger.info("Staff %s already checked in for %s", normalized, start.date())
            return CheckinResult(message=MSG_ALREADY_CHECKED_IN, created=False, record=existing[0])

        try:
            record = self._attendance.insert(staff_id=normalized, checked_at=now, status=AttendanceStatus.PRESENT)
        except DuplicateAttendanceError:
            # A concurrent scan inserted first; the unique constraint kept it to one row.
            logger.info("Staff %s check-in lost insert race for %s", normalized, start.date())
            return CheckinResult(message=MSG_ALREADY_CHECKED_IN, created=False)

        logger.info("Attendance recorded for staff %s at %s", normalized, now.isoformat())
        return CheckinResult(message=MSG_ATTENDANCE_RECORDED, created=True, record=record)

    def submit(self, staff_id: Optional[str], token: Optional[str], *, now: Optional[datetime] = None) -> SubmitResult:
        try:
            result = self.check_in(staff_id, token, now=now)
        except PersistenceError as e:
            logger.exception("Check-in failed to reach the attendance store for %r", staff_id)
            return SubmitResult(ok=False, message=str(e) or "Check-in failed")
        except DomainError as e:
            logger.warning("Check-in rejected for %r: %s", staff_id, e)
            return SubmitResult(ok=False, message=str(e) or "Check-in failed")
        return SubmitResult(ok=True, message=result.message)

    def _ensure_fresh(self, token: CheckinToken, now: datetime) -> None:
        age_ms = token.age_ms(now)
        # Negative age: issued in the future (clock skew or forged timestamp).
        if age_ms < 0 or age_ms > self.ttl_ms:
            raise TokenExpiredError("Token expired")
