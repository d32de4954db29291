from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..common.datetime_utils import as_utc
from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateAttendanceError, PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import MYSQL_DUPLICATE_KEY, db_cursor, fetchall, from_db_datetime, to_db_datetime
from .model import AttendanceRecord
from .repository import AttendanceStore

_SELECT = """
    SELECT sa.id, sa.staff_id, sa.checked_at, sa.status,
           COALESCE(s.name, '') AS staff_name,
           COALESCE(s.department, '') AS department
    FROM staff_attendance sa
    LEFT JOIN staff s ON s.staff_id = sa.staff_id
"""


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["id"]),
        staff_id=str(r["staff_id"]),
        checked_at=from_db_datetime(r["checked_at"]),
        status=AttendanceStatus(r["status"]),
        staff_name=r.get("staff_name") or "",
        department=r.get("department") or "",
    )


class MySQLAttendanceRepository(AttendanceStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _query(self, sql: str, params: tuple) -> Sequence[AttendanceRecord]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, params)
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(str(e)) from e
        return [_to_record(r) for r in rows]

    def find_by_staff_and_date_range(
        self,
        staff_id: str,
        start_inclusive: datetime,
        end_exclusive: datetime,
    ) -> Sequence[AttendanceRecord]:
        return self._query(
            _SELECT
            + """
            WHERE sa.staff_id=%s AND sa.checked_at >= %s AND sa.checked_at < %s
            ORDER BY sa.checked_at ASC
            LIMIT 1
            """,
            (staff_id, to_db_datetime(start_inclusive), to_db_datetime(end_exclusive)),
        )

    def insert(
        self,
        *,
        staff_id: str,
        checked_at: datetime,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        checked_at = as_utc(checked_at)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO staff_attendance(staff_id, work_date, checked_at, status)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (staff_id, checked_at.date(), to_db_datetime(checked_at), status.value),
                )
                record_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if e.errno == MYSQL_DUPLICATE_KEY:
                raise DuplicateAttendanceError(str(e)) from e
            raise PersistenceError(str(e)) from e
        except mysql.connector.Error as e:
            raise PersistenceError(str(e)) from e

        return AttendanceRecord(record_id=record_id, staff_id=staff_id, checked_at=checked_at, status=status)

    def list_records(
        self,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if start is not None:
            clauses.append("sa.checked_at >= %s")
            params.append(to_db_datetime(start))
        if end is not None:
            clauses.append("sa.checked_at < %s")
            params.append(to_db_datetime(end))

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        return self._query(f"{_SELECT} {where} ORDER BY sa.checked_at DESC", tuple(params))

    def list_for_staff(self, staff_id: str) -> Sequence[AttendanceRecord]:
        return self._query(_SELECT + " WHERE sa.staff_id=%s ORDER BY sa.checked_at DESC", (staff_id,))
