from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, unique_id, first_name, father_name, grade, class_name
                FROM students
                WHERE is_active=1
                ORDER BY grade, first_name, father_name
                """
            )
            rows = fetchall(cur)
            return [
                Student(
                    student_id=str(r["student_id"]),
                    unique_id=r.get("unique_id") or "",
                    first_name=r.get("first_name") or "",
                    father_name=r.get("father_name") or "",
                    grade=r.get("grade") or "",
                    class_name=r.get("class_name") or "",
                )
                for r in rows
            ]
