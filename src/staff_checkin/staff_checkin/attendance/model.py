from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one staff attendance row (at most one per staff per UTC day).

    `staff_name` / `department` are filled by read queries that join the staff table.
    """

    record_id: int
    staff_id: str
    checked_at: datetime
    status: AttendanceStatus
    staff_name: str = ""
    department: str = ""
