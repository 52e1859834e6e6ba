from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..attendance.model import ExportFile, ExportRow

_SEPARATORS = re.compile(r"[\s,]+")


def export_filename(date_label: str, *, extension: str = "xlsx") -> str:
    """``"Sene 30, 2017"`` -> ``"Attendance_Sene_30_2017.xlsx"``."""
    return f"Attendance_{_SEPARATORS.sub('_', date_label)}.{extension}"


class AttendanceExporter(Protocol):
    def export(self, rows: Sequence["ExportRow"], *, date_label: str) -> "ExportFile":
        raise NotImplementedError
