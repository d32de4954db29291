from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceStore(Protocol):
    def find_by_staff_and_date_range(
        self,
        staff_id: str,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def insert(
        self,
        *,
        staff_id: str,
        checked_at: datetime,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        """Persist a record.

        Raises DuplicateAttendanceError when the staff member already has a row for that UTC day.
        """

        raise NotImplementedError

    def list_records(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_staff(self, staff_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
