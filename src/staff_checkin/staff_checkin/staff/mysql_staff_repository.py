from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Staff
from .repository import StaffDirectory


class MySQLStaffRepository(StaffDirectory):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_normalized_id(self, staff_id: str) -> Optional[Staff]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT staff_id, name, department, email
                    FROM staff
                    WHERE staff_id=%s
                    """,
                    (staff_id,),
                )
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(str(e)) from e

        if not row:
            return None
        return Staff(
            staff_id=str(row["staff_id"]).upper(),
            name=row.get("name") or "",
            department=row.get("department") or "",
            email=row.get("email"),
        )
