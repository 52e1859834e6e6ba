"""Example: drive an attendance session without Flask or a database.

Controllers are a thin layer; the rules live in the session reducers.
"""

from datetime import datetime
from pathlib import Path

from src.sunday_attendance.sunday_attendance.attendance import session as reducers
from src.sunday_attendance.sunday_attendance.export.excel_exporter import ExcelAttendanceExporter
from src.sunday_attendance.sunday_attendance.students.model import Student


def main():
    roster = [
        Student("1", "SS-0001", "Abel", "Tesfaye", "5", "5A"),
        Student("2", "SS-0002", "Hanna", "Girma", "5", "5A"),
        Student("3", "SS-0003", "Dawit", "Alemu", "6", "6B"),
    ]
    state = reducers.start_session(roster, datetime(2025, 7, 6, 10, 0))
    print(state.date_label, "editable:", state.is_editable_day)

    state = reducers.toggle_present(state, "1")
    state = reducers.toggle_permission(state, "2")
    print(reducers.summarize(state))

    state, export_file = reducers.submit(state, ExcelAttendanceExporter())
    Path(export_file.filename).write_bytes(export_file.content)
    print("wrote", export_file.filename)


if __name__ == "__main__":
    main()
