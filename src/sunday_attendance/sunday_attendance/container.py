from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .attendance.repository import InMemorySessionStore, SessionStore
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, build_clock
from .core.constants import DEFAULT_ROSTER_TIMEOUT
from .core.enums import RosterSource
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .export.base import AttendanceExporter
from .export.excel_exporter import ExcelAttendanceExporter
from .students.http_student_repository import HttpStudentRepository
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import RosterService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    students_repo: StudentRepository

    auth_service: AuthService
    roster_service: RosterService
    attendance_service: AttendanceService


def wire(
    *,
    users_repo: UserRepository,
    students_repo: StudentRepository,
    clock: Clock,
    store: Optional[SessionStore] = None,
    exporter: Optional[AttendanceExporter] = None,
) -> Container:
    roster_service = RosterService(students_repo)
    return Container(
        users_repo=users_repo,
        students_repo=students_repo,
        auth_service=AuthService(users_repo),
        roster_service=roster_service,
        attendance_service=AttendanceService(
            roster_service,
            store if store is not None else InMemorySessionStore(),
            exporter if exporter is not None else ExcelAttendanceExporter(),
            clock,
        ),
    )


def build_students_repo(settings: Any, conn: DatabaseConnection) -> StudentRepository:
    try:
        source = RosterSource(str(getattr(settings, "ROSTER_SOURCE", RosterSource.MYSQL.value)).lower())
    except ValueError as e:
        raise ValidationError(f"Unsupported ROSTER_SOURCE: {settings.ROSTER_SOURCE!r}") from e

    if source == RosterSource.HTTP:
        url = getattr(settings, "ROSTER_URL", "")
        if not url:
            raise ValidationError("ROSTER_URL is required when ROSTER_SOURCE=http")
        token = getattr(settings, "ROSTER_TOKEN", "")
        return HttpStudentRepository(
            url,
            timeout=float(getattr(settings, "ROSTER_TIMEOUT", DEFAULT_ROSTER_TIMEOUT)),
            headers={"Authorization": f"Bearer {token}"} if token else None,
        )
    return MySQLStudentRepository(conn)


def build_container(settings: Any) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    clock = build_clock(
        timezone=getattr(settings, "TIMEZONE", "") or None,
        fixed_now=getattr(settings, "ATTENDANCE_NOW", "") or None,
    )
    return wire(
        users_repo=MySQLUserRepository(conn),
        students_repo=build_students_repo(settings, conn),
        clock=clock,
    )
