from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import clean_text


@dataclass(frozen=True)
class Student:
    """Domain entity: one enrolled student on the roster (read-only)."""

    student_id: str
    unique_id: str
    first_name: str
    father_name: str
    grade: str
    class_name: str = ""

    @property
    def has_identity(self) -> bool:
        return bool(self.student_id)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Student":
        """Build from the roster JSON shape (``_id``, ``Unique_ID``, ``First_Name`` ...)."""
        return cls(
            student_id=clean_text(payload.get("_id")),
            unique_id=clean_text(payload.get("Unique_ID")),
            first_name=clean_text(payload.get("First_Name")),
            father_name=clean_text(payload.get("Father_Name")),
            grade=clean_text(payload.get("Grade")),
            class_name=clean_text(payload.get("Class")),
        )

    def to_payload(self) -> dict:
        return {
            "_id": self.student_id,
            "Unique_ID": self.unique_id,
            "First_Name": self.first_name,
            "Father_Name": self.father_name,
            "Class": self.class_name,
            "Grade": self.grade,
        }
