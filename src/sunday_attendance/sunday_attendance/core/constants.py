"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SUNDAY = 0
DEFAULT_ROSTER_TIMEOUT = 10.0
EXPORT_SHEET_NAME = "Attendance"
EXPORT_COLUMNS = ("Unique_ID", "First_Name", "Father_Name", "Class", "Status", "Date")
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
