from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceStore
from .attendance.service import AttendanceHistoryService
from .checkin.issuer import TokenIssuer
from .checkin.kiosk import CheckinKiosk
from .checkin.service import CheckinService
from .core.constants import CHECKIN_TOKEN_TTL_SECONDS, DEFAULT_PUBLIC_ORIGIN, QR_DISPLAY_TTL_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffDirectory


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    public_origin: Optional[str]

    staff_repo: StaffDirectory
    attendance_repo: AttendanceStore

    checkin_service: CheckinService
    history_service: AttendanceHistoryService
    issuer: TokenIssuer
    kiosk: CheckinKiosk


def assemble(
    *,
    staff_repo: StaffDirectory,
    attendance_repo: AttendanceStore,
    conn: Optional[DatabaseConnection] = None,
    checkin_ttl_seconds: int = CHECKIN_TOKEN_TTL_SECONDS,
    display_ttl_seconds: int = QR_DISPLAY_TTL_SECONDS,
    public_origin: Optional[str] = None,
) -> Container:
    checkin_service = CheckinService(staff_repo, attendance_repo, ttl_seconds=checkin_ttl_seconds)
    issuer = TokenIssuer(display_ttl_seconds=display_ttl_seconds, default_origin=public_origin or DEFAULT_PUBLIC_ORIGIN)

    return Container(
        conn=conn,
        public_origin=public_origin.rstrip("/") if public_origin else None,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        checkin_service=checkin_service,
        history_service=AttendanceHistoryService(attendance_repo, staff_repo),
        issuer=issuer,
        kiosk=CheckinKiosk(issuer, checkin_service),
    )


def build_container(
    *,
    db_config: dict,
    checkin_ttl_seconds: int = CHECKIN_TOKEN_TTL_SECONDS,
    display_ttl_seconds: int = QR_DISPLAY_TTL_SECONDS,
    public_origin: Optional[str] = None,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble(
        staff_repo=MySQLStaffRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        checkin_ttl_seconds=checkin_ttl_seconds,
        display_ttl_seconds=display_ttl_seconds,
        public_origin=public_origin,
    )
