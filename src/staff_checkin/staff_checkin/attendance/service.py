from __future__ import annotations

import csv
import io
import re
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence, Union

from ..common.datetime_utils import parse_date_filter, utc_day_bounds
from ..common.validators import normalize_staff_id
from ..staff.repository import StaffDirectory
from .model import AttendanceRecord
from .repository import AttendanceStore

CSV_HEADERS = ["Date", "Staff ID", "Staff Name", "Department", "Status"]

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


class AttendanceHistoryService:
    """Read side of staff attendance: admin list, own history, CSV export."""

    def __init__(self, attendance: AttendanceStore, staff: StaffDirectory):
        self._attendance = attendance
        self._staff = staff

    def list_records(
        self,
        *,
        department_filter: str = "",
        staff_name_or_id_filter: str = "",
        date_filter: Union[str, date, None] = None,
    ) -> list[AttendanceRecord]:
        day = parse_date_filter(date_filter)
        if day is not None:
            start, end = utc_day_bounds(day)
            rows = self._attendance.list_records(start=start, end=end)
        else:
            rows = self._attendance.list_records()

        department = (department_filter or "").strip().lower()
        term = (staff_name_or_id_filter or "").strip().lower()

        out: list[AttendanceRecord] = []
        for r in rows:
            if department and department not in r.department.lower():
                continue
            if term and term not in r.staff_name.lower() and term not in r.staff_id.lower():
                continue
            out.append(r)

        out.sort(key=lambda r: r.checked_at, reverse=True)
        return out

    def history_for_staff(self, staff_id: str) -> list[AttendanceRecord]:
        normalized = normalize_staff_id(staff_id)
        rows = self._attendance.list_for_staff(normalized)

        profile = self._staff.find_by_normalized_id(normalized)
        if profile:
            rows = [replace(r, staff_name=profile.name, department=profile.department) for r in rows]
        return sorted(rows, key=lambda r: r.checked_at, reverse=True)

    def export_csv(self, rows: Sequence[AttendanceRecord]) -> bytes:
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(CSV_HEADERS)
        for r in rows:
            writer.writerow([r.checked_at.date().isoformat(), r.staff_id, r.staff_name, r.department, r.status.value])
        return out.getvalue().encode("utf-8-sig")


def to_json_row(r: AttendanceRecord) -> dict:
    return {
        "id": str(r.record_id),
        "staffId": r.staff_id,
        "staffName": r.staff_name,
        "department": r.department,
        "date": r.checked_at.isoformat().replace("+00:00", "Z"),
        "status": r.status.value,
    }


def filters_from_mapping(data: Optional[dict]) -> dict:
    data = data or {}
    return {
        "department_filter": str(data.get("departmentFilter") or ""),
        "staff_name_or_id_filter": str(data.get("staffNameOrIdFilter") or ""),
        "date_filter": data.get("dateFilter") or None,
    }


def export_filename(
    *,
    department_filter: str = "",
    staff_name_or_id_filter: str = "",
    date_filter: Union[str, date, None] = None,
) -> str:
    """`attendance_staff[_dept_X][_staff_Y][_date_YYYYMMDD].csv`"""
    parts = ["attendance_staff"]
    if department_filter.strip():
        parts.append("dept_" + _filename_part(department_filter))
    if staff_name_or_id_filter.strip():
        parts.append("staff_" + _filename_part(staff_name_or_id_filter))
    day = parse_date_filter(date_filter)
    if day is not None:
        parts.append("date_" + day.strftime("%Y%m%d"))
    return "_".join(parts) + ".csv"


def _filename_part(value: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("", re.sub(r"\s+", "_", value.strip()))
