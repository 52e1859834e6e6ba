from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles allowed to sign in."""

    ADMIN = "admin"
    TEACHER = "teacher"


class AttendanceStatus(str, Enum):
    """Status written to the exported sheet for one student."""

    PRESENT = "Present"
    PERMISSION = "Permission"
    ABSENT = "Absent"


class RosterSource(str, Enum):
    MYSQL = "mysql"
    HTTP = "http"
