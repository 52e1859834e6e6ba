from __future__ import annotations

import io
import logging
from typing import Sequence

import pandas as pd

from ..attendance.model import ExportFile, ExportRow
from ..core.constants import EXPORT_COLUMNS, EXPORT_SHEET_NAME, XLSX_MIMETYPE
from .base import AttendanceExporter, export_filename

logger = logging.getLogger(__name__)


class ExcelAttendanceExporter(AttendanceExporter):
    """Write the attendance sheet as a single-sheet ``.xlsx`` workbook."""

    def __init__(self, *, sheet_name: str = EXPORT_SHEET_NAME):
        self._sheet_name = sheet_name

    def to_frame(self, rows: Sequence[ExportRow]) -> pd.DataFrame:
        return pd.DataFrame([r.as_dict() for r in rows], columns=list(EXPORT_COLUMNS))

    def export(self, rows: Sequence[ExportRow], *, date_label: str) -> ExportFile:
        df = self.to_frame(rows)

        out = io.BytesIO()
        with pd.ExcelWriter(out, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=self._sheet_name)

        filename = export_filename(date_label)
        logger.info("Exported %d attendance rows to %s", len(df), filename)
        return ExportFile(filename=filename, content=out.getvalue(), mimetype=XLSX_MIMETYPE)
