from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.staff_checkin.staff_checkin.attendance.service import CSV_HEADERS, AttendanceHistoryService, export_filename
from src.staff_checkin.staff_checkin.core.enums import AttendanceStatus


def _at(day: int, hour: int) -> datetime:
    return datetime(2026, 2, day, hour, 0, tzinfo=timezone.utc)


@pytest.fixture
def history(staff_repo, attendance_repo) -> AttendanceHistoryService:
    attendance_repo.add("TCH001", _at(1, 8))
    attendance_repo.add("TCH002", _at(1, 9))
    attendance_repo.add("TCH001", _at(2, 8))
    attendance_repo.add("TCH002", _at(2, 10), AttendanceStatus.LATE)
    return AttendanceHistoryService(attendance_repo, staff_repo)


def test_list_is_newest_first(history):
    rows = history.list_records()
    assert [r.checked_at for r in rows] == [_at(2, 10), _at(2, 8), _at(1, 9), _at(1, 8)]
    assert rows[0].staff_name == "Daniel Mensah"


def test_department_filter_is_case_insensitive_substring(history):
    rows = history.list_records(department_filter="MATH")
    assert {r.staff_id for r in rows} == {"TCH001"}


@pytest.mark.parametrize("term", ["mensah", "tch002", "Daniel"])
def test_name_or_id_filter(history, term):
    rows = history.list_records(staff_name_or_id_filter=term)
    assert {r.staff_id for r in rows} == {"TCH002"}


@pytest.mark.parametrize("value", ["2026-02-01", date(2026, 2, 1), "2026-02-01T15:00:00Z"])
def test_date_filter_uses_utc_day(history, value):
    rows = history.list_records(date_filter=value)
    assert [r.checked_at for r in rows] == [_at(1, 9), _at(1, 8)]


def test_invalid_date_filter_is_ignored(history):
    assert len(history.list_records(date_filter="not-a-date")) == 4


def test_history_for_staff_is_enriched_from_profile(history):
    rows = history.history_for_staff(" tch001")

    assert [r.checked_at for r in rows] == [_at(2, 8), _at(1, 8)]
    assert {(r.staff_name, r.department) for r in rows} == {("Anita Rao", "Mathematics")}


def test_export_csv(history):
    body = history.export_csv(history.list_records(staff_name_or_id_filter="TCH002")).decode("utf-8-sig")
    lines = body.splitlines()

    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == "2026-02-02,TCH002,Daniel Mensah,Science,Late"
    assert len(lines) == 3


@pytest.mark.parametrize(
    "filters, expected",
    [
        ({}, "attendance_staff.csv"),
        ({"date_filter": "2026-02-01"}, "attendance_staff_date_20260201.csv"),
        (
            {"department_filter": "Social Studies", "staff_name_or_id_filter": "anita", "date_filter": date(2026, 2, 1)},
            "attendance_staff_dept_Social_Studies_staff_anita_date_20260201.csv",
        ),
        ({"department_filter": 'x"; y=1', "date_filter": "garbage"}, "attendance_staff_dept_x_y1.csv"),
    ],
)
def test_export_filename(filters, expected):
    assert export_filename(**filters) == expected
