from __future__ import annotations

import csv
import io
from typing import Iterable

from ..common.datetime_utils import format_date_us, format_hours, format_hours_hhmm
from .model import AttendanceReportRow

ATTENDANCE_CSV_FIELDS = [
    "date",
    "employee_id",
    "employee_code",
    "employee_name",
    "check_in",
    "check_out",
    "total_hours",
    "total_hhmm",
    "regular_hours",
    "overtime_hours",
    "break_minutes",
    "late_arrival",
    "early_departure",
]


def attendance_csv_row(row: AttendanceReportRow) -> dict:
    data = row.to_dict()
    return {
        "date": format_date_us(row.work_date),
        "employee_id": row.employee_id,
        "employee_code": row.employee_code,
        "employee_name": row.employee_name,
        "check_in": data["check_in"] or "",
        "check_out": data["check_out"] or "",
        "total_hours": format_hours(row.total_hours),
        "total_hhmm": format_hours_hhmm(row.total_hours),
        "regular_hours": format_hours(row.regular_hours),
        "overtime_hours": format_hours(row.overtime_hours),
        "break_minutes": data["break_minutes"],
        "late_arrival": "yes" if row.late_arrival else "no",
        "early_departure": "yes" if row.early_departure else "no",
    }


def write_attendance_csv(rows: Iterable[AttendanceReportRow]) -> bytes:
    """Attendance report as CSV bytes (UTF-8 with BOM so Excel opens it cleanly)."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=ATTENDANCE_CSV_FIELDS)
    writer.writeheader()
    for row in rows:
        writer.writerow(attendance_csv_row(row))
    return out.getvalue().encode("utf-8-sig")
