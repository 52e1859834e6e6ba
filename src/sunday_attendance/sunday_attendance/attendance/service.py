from __future__ import annotations

import logging
from dataclasses import dataclass

from ..common.datetime_utils import Clock
from ..core.enums import AttendanceStatus
from ..export.base import AttendanceExporter
from ..students.service import RosterService
from . import session as reducers
from .model import ExportFile, SessionState
from .repository import SessionStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceRowUI:
    student_id: str
    unique_id: str
    first_name: str
    father_name: str
    grade: str
    class_name: str
    status: str
    css_class: str


@dataclass(frozen=True)
class AttendanceView:
    date_label: str
    is_sunday: bool
    search_term: str
    grade_filter: str
    grades: list[str]
    rows: list[AttendanceRowUI]
    summary: dict[str, int]
    roster_size: int


_CSS = {
    AttendanceStatus.PRESENT: "bg-success",
    AttendanceStatus.PERMISSION: "bg-warning text-dark",
    AttendanceStatus.ABSENT: "bg-secondary",
}


class AttendanceService:
    """Use case: mark Sunday attendance for one browser session and submit it."""

    def __init__(
        self,
        roster: RosterService,
        store: SessionStore,
        exporter: AttendanceExporter,
        clock: Clock,
    ):
        self._roster = roster
        self._store = store
        self._exporter = exporter
        self._clock = clock

    def get_state(self, key: str) -> SessionState:
        """Current session for ``key``, restarted when the local day has changed."""
        now = self._clock.now()
        state = self._store.get(key)
        if state is None or state.session_date != now.date():
            dropped = self._store.discard_stale(now.date())
            if dropped:
                logger.info("Dropped %d attendance session(s) from earlier days", dropped)
            state = reducers.start_session(self._roster.load_roster(), now)
            self._store.put(key, state)
            logger.info(
                "Started attendance session date=%s is_sunday=%s roster=%d",
                state.date_label,
                state.is_editable_day,
                len(state.roster),
            )
        return state

    def _dispatch(self, key: str, action: reducers.Action) -> SessionState:
        state = reducers.apply(self.get_state(key), action)
        self._store.put(key, state)
        return state

    def set_filters(self, key: str, *, search_term: str = "", grade_filter: str = "") -> SessionState:
        self._dispatch(key, reducers.SetSearch(search_term))
        return self._dispatch(key, reducers.SetGradeFilter(grade_filter))

    def toggle_present(self, key: str, student_id: str) -> AttendanceStatus:
        state = self._dispatch(key, reducers.TogglePresent(student_id))
        return reducers.status_for(state, student_id)

    def toggle_permission(self, key: str, student_id: str) -> AttendanceStatus:
        state = self._dispatch(key, reducers.TogglePermission(student_id))
        return reducers.status_for(state, student_id)

    def submit(self, key: str) -> ExportFile:
        state, export_file = reducers.submit(self.get_state(key), self._exporter)
        self._store.put(key, state)
        logger.info("Submitted attendance for %s (%d students)", state.date_label, len(state.roster))
        return export_file

    def discard(self, key: str) -> None:
        self._store.discard(key)

    def get_view(self, key: str) -> AttendanceView:
        state = self.get_state(key)
        rows = []
        for s in reducers.filter_view(state):
            status = reducers.status_for(state, s.student_id)
            rows.append(
                AttendanceRowUI(
                    student_id=s.student_id,
                    unique_id=s.unique_id,
                    first_name=s.first_name,
                    father_name=s.father_name,
                    grade=s.grade,
                    class_name=s.class_name,
                    status=status.value,
                    css_class=_CSS[status],
                )
            )

        return AttendanceView(
            date_label=state.date_label,
            is_sunday=state.is_editable_day,
            search_term=state.search_term,
            grade_filter=state.grade_filter,
            grades=reducers.grade_options(state.roster),
            rows=rows,
            summary=reducers.summarize(state),
            roster_size=len(state.roster),
        )
