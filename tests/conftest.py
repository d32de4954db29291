from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import pytest

from src.staff_checkin.staff_checkin.attendance.model import AttendanceRecord
from src.staff_checkin.staff_checkin.common.datetime_utils import as_utc
from src.staff_checkin.staff_checkin.core.enums import AttendanceStatus
from src.staff_checkin.staff_checkin.core.exceptions import DuplicateAttendanceError
from src.staff_checkin.staff_checkin.staff.model import Staff


@dataclass
class InMemoryStaff:
    staff_by_id: dict[str, Staff]
    lookups: list[str] = field(default_factory=list)

    def find_by_normalized_id(self, staff_id: str) -> Optional[Staff]:
        self.lookups.append(staff_id)
        return self.staff_by_id.get(staff_id)


class InMemoryAttendance:
    """Mirrors the UNIQUE(staff_id, work_date) constraint of the real table."""

    def __init__(self, staff: Optional[InMemoryStaff] = None):
        self._records: list[AttendanceRecord] = []
        self._id = 0
        self._staff = staff

    @property
    def records(self) -> list[AttendanceRecord]:
        return list(self._records)

    def find_by_staff_and_date_range(self, staff_id: str, start_inclusive: datetime, end_exclusive: datetime):
        return [
            r for r in self._records
            if r.staff_id == staff_id and start_inclusive <= r.checked_at < end_exclusive
        ]

    def insert(self, *, staff_id: str, checked_at: datetime, status: AttendanceStatus) -> AttendanceRecord:
        checked_at = as_utc(checked_at)
        for r in self._records:
            if r.staff_id == staff_id and r.checked_at.date() == checked_at.date():
                raise DuplicateAttendanceError("Duplicate entry for key 'uq_staff_attendance_per_day'")
        self._id += 1
        rec = AttendanceRecord(record_id=self._id, staff_id=staff_id, checked_at=checked_at, status=status)
        self._records.append(rec)
        return rec

    def add(self, staff_id: str, checked_at: datetime, status: AttendanceStatus = AttendanceStatus.PRESENT):
        return self.insert(staff_id=staff_id, checked_at=checked_at, status=status)

    def _joined(self, r: AttendanceRecord) -> AttendanceRecord:
        staff = self._staff.staff_by_id.get(r.staff_id) if self._staff else None
        if not staff:
            return r
        return AttendanceRecord(
            record_id=r.record_id,
            staff_id=r.staff_id,
            checked_at=r.checked_at,
            status=r.status,
            staff_name=staff.name,
            department=staff.department,
        )

    def list_records(self, *, start=None, end=None):
        items = [
            self._joined(r) for r in self._records
            if (start is None or r.checked_at >= start) and (end is None or r.checked_at < end)
        ]
        items.sort(key=lambda r: r.checked_at, reverse=True)
        return items

    def list_for_staff(self, staff_id: str):
        items = [r for r in self._records if r.staff_id == staff_id]
        items.sort(key=lambda r: r.checked_at, reverse=True)
        return items



class FakeCursor:
    def __init__(self, db: "FakeDatabase"):
        self._db = db
        self.lastrowid = None

    def execute(self, sql: str, params: tuple = ()):
        self._db.executed.append((" ".join(sql.split()), params))
        if self._db.error is not None:
            raise self._db.error
        self.lastrowid = self._db.lastrowid

    def fetchone(self):
        return self._db.rows[0] if self._db.rows else None

    def fetchall(self):
        return list(self._db.rows)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: "FakeDatabase"):
        self._db = db

    def cursor(self, dictionary: bool = False):
        return FakeCursor(self._db)

    def commit(self):
        self._db.commits += 1

    def rollback(self):
        self._db.rollbacks += 1

    def close(self):
        self._db.closed += 1


@dataclass
class FakeDatabase:
    """Stands in for DatabaseConnection: canned rows, or an error raised by execute()."""

    rows: list[dict] = field(default_factory=list)
    error: Optional[Exception] = None
    lastrowid: int = 1
    executed: list[tuple] = field(default_factory=list)
    commits: int = 0
    rollbacks: int = 0
    closed: int = 0

    def connect(self):
        return FakeConnection(self)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def staff_repo() -> InMemoryStaff:
    return InMemoryStaff(
        {
            "TCH001": Staff(staff_id="TCH001", name="Anita Rao", department="Mathematics"),
            "TCH002": Staff(staff_id="TCH002", name="Daniel Mensah", department="Science"),
        }
    )


@pytest.fixture
def attendance_repo(staff_repo) -> InMemoryAttendance:
    return InMemoryAttendance(staff_repo)
