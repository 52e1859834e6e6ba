from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from ..core.enums import AttendanceStatus
from ..students.model import Student

RecordKey = tuple[str, str]


@dataclass(frozen=True)
class AttendanceRecord:
    """One student's marks for one date.

    ``present`` and ``has_permission`` are never both true.
    """

    student_id: str
    date_label: str
    present: bool = False
    has_permission: bool = False

    @property
    def key(self) -> RecordKey:
        return (self.student_id, self.date_label)

    @property
    def status(self) -> AttendanceStatus:
        if self.present:
            return AttendanceStatus.PRESENT
        if self.has_permission:
            return AttendanceStatus.PERMISSION
        return AttendanceStatus.ABSENT

    @property
    def is_marked(self) -> bool:
        return self.present or self.has_permission


@dataclass(frozen=True)
class SessionState:
    """Everything the attendance page knows about the current session."""

    date_label: str
    is_editable_day: bool
    roster: tuple[Student, ...] = ()
    records: Mapping[RecordKey, AttendanceRecord] = field(default_factory=lambda: MappingProxyType({}))
    search_term: str = ""
    grade_filter: str = ""
    # local calendar day the session was started for
    session_date: Optional[date] = None

    def record_for(self, student_id: str):
        return self.records.get((student_id, self.date_label))


@dataclass(frozen=True)
class ExportRow:
    """Read-model for one spreadsheet row."""

    unique_id: str
    first_name: str
    father_name: str
    class_name: str
    status: AttendanceStatus
    date_label: str

    def as_dict(self) -> dict:
        return {
            "Unique_ID": self.unique_id,
            "First_Name": self.first_name,
            "Father_Name": self.father_name,
            "Class": self.class_name,
            "Status": self.status.value,
            "Date": self.date_label,
        }


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    mimetype: str
