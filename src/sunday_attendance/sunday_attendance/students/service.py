from __future__ import annotations

import logging

from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: load the roster for a new attendance session."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def load_roster(self) -> list[Student]:
        # A failed fetch leaves the session with an empty, unusable roster.
        try:
            return list(self._students.list_all())
        except Exception:
            logger.exception("Roster fetch failed; continuing with an empty roster")
            return []
