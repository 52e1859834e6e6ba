"""Attendance session reducers.

Every function here is pure: it takes a ``SessionState`` (plus an action's
arguments) and returns a new state, or raises without touching the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from types import MappingProxyType
from typing import Iterable, Optional, Sequence, Union

from ..calendar.ethiopian import to_label
from ..common.datetime_utils import is_sunday
from ..core.enums import AttendanceStatus
from ..core.exceptions import EmptySubmissionError, NotEditableDayError, ValidationError
from ..export.base import AttendanceExporter
from ..students.model import Student
from .model import AttendanceRecord, ExportFile, ExportRow, SessionState

PRESENT_CLOSED_MESSAGE = "Attendance can only be marked on Sundays"
PERMISSION_CLOSED_MESSAGE = "Permission can only be marked on Sundays"
SUBMIT_CLOSED_MESSAGE = "Attendance can only be submitted on Sundays"
EMPTY_SUBMISSION_MESSAGE = "Please mark at least one student as Present or with Permission"


@dataclass(frozen=True)
class TogglePresent:
    student_id: str


@dataclass(frozen=True)
class TogglePermission:
    student_id: str


@dataclass(frozen=True)
class SetSearch:
    search_term: str


@dataclass(frozen=True)
class SetGradeFilter:
    grade_filter: str


Action = Union[TogglePresent, TogglePermission, SetSearch, SetGradeFilter]


def start_session(roster: Iterable[Student], now: datetime) -> SessionState:
    """Derive the date label and Sunday flag once for a new session.

    ``now`` is expected in the local time of the school (see ``build_clock``).
    """
    return SessionState(
        date_label=to_label(now),
        is_editable_day=is_sunday(now.date()),
        roster=tuple(roster),
        session_date=now.date(),
    )


def _require_on_roster(state: SessionState, student_id: str) -> None:
    if not student_id or not any(s.student_id == student_id for s in state.roster):
        raise ValidationError(f"Student {student_id!r} is not on the roster")


def _with_record(state: SessionState, record: AttendanceRecord) -> SessionState:
    records = dict(state.records)
    records[record.key] = record
    return replace(state, records=MappingProxyType(records))


def toggle_present(state: SessionState, student_id: str) -> SessionState:
    if not state.is_editable_day:
        raise NotEditableDayError(PRESENT_CLOSED_MESSAGE)
    _require_on_roster(state, student_id)

    record = state.record_for(student_id)
    if record is None:
        record = AttendanceRecord(student_id, state.date_label, present=True, has_permission=False)
    else:
        record = replace(record, present=not record.present, has_permission=False)
    return _with_record(state, record)


def toggle_permission(state: SessionState, student_id: str) -> SessionState:
    if not state.is_editable_day:
        raise NotEditableDayError(PERMISSION_CLOSED_MESSAGE)
    _require_on_roster(state, student_id)

    record = state.record_for(student_id)
    if record is None:
        record = AttendanceRecord(student_id, state.date_label, present=False, has_permission=True)
    else:
        record = replace(record, has_permission=not record.has_permission, present=False)
    return _with_record(state, record)


def _matches(student: Student, needle: str) -> bool:
    if not needle:
        return True
    fields = (student.unique_id, student.first_name, student.father_name, student.grade)
    return any(needle in (value or "").lower() for value in fields)


def filter_view(
    source: Union[SessionState, Sequence[Student]],
    search_term: Optional[str] = None,
    grade_filter: Optional[str] = None,
) -> list[Student]:
    """Roster entries matching the search term and grade, in roster order.

    With a ``SessionState`` the state's own criteria are used unless
    overridden. Entries without an identity never match.
    """
    if isinstance(source, SessionState):
        roster = source.roster
        search_term = source.search_term if search_term is None else search_term
        grade_filter = source.grade_filter if grade_filter is None else grade_filter
    else:
        roster = source

    needle = (search_term or "").lower()
    grade_filter = grade_filter or ""
    return [
        s
        for s in roster
        if s.has_identity and (not grade_filter or s.grade == grade_filter) and _matches(s, needle)
    ]


def set_search(state: SessionState, search_term: str) -> SessionState:
    return replace(state, search_term=search_term or "")


def set_grade_filter(state: SessionState, grade_filter: str) -> SessionState:
    return replace(state, grade_filter=(grade_filter or "").strip())


def status_for(state: SessionState, student_id: str) -> AttendanceStatus:
    record = state.record_for(student_id)
    return record.status if record else AttendanceStatus.ABSENT


def grade_options(roster: Iterable[Student]) -> list[str]:
    seen: dict[str, None] = {}
    for s in roster:
        if s.grade:
            seen.setdefault(s.grade, None)
    return list(seen)


def summarize(state: SessionState) -> dict[str, int]:
    counts = {status.value: 0 for status in AttendanceStatus}
    for s in state.roster:
        counts[status_for(state, s.student_id).value] += 1
    return counts


def has_marked_students(state: SessionState) -> bool:
    return any(r.date_label == state.date_label and r.is_marked for r in state.records.values())


def build_export_rows(state: SessionState) -> list[ExportRow]:
    return [
        ExportRow(
            unique_id=s.unique_id,
            first_name=s.first_name,
            father_name=s.father_name,
            class_name=s.class_name,
            status=status_for(state, s.student_id),
            date_label=state.date_label,
        )
        for s in state.roster
    ]


def submit(state: SessionState, exporter: AttendanceExporter) -> tuple[SessionState, ExportFile]:
    """Export the sheet and return a fresh state with no records."""
    if not state.is_editable_day:
        raise NotEditableDayError(SUBMIT_CLOSED_MESSAGE)
    if not has_marked_students(state):
        raise EmptySubmissionError(EMPTY_SUBMISSION_MESSAGE)

    export_file = exporter.export(build_export_rows(state), date_label=state.date_label)
    return replace(state, records=MappingProxyType({})), export_file


def apply(state: SessionState, action: Action) -> SessionState:
    if isinstance(action, TogglePresent):
        return toggle_present(state, action.student_id)
    if isinstance(action, TogglePermission):
        return toggle_permission(state, action.student_id)
    if isinstance(action, SetSearch):
        return set_search(state, action.search_term)
    if isinstance(action, SetGradeFilter):
        return set_grade_filter(state, action.grade_filter)
    raise ValidationError(f"Unsupported action: {type(action).__name__}")
