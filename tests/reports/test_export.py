import codecs
import csv
import io
from datetime import date, datetime
from decimal import Decimal

from timepunch.reports.export import ATTENDANCE_CSV_FIELDS, write_attendance_csv
from timepunch.reports.model import AttendanceReportRow


def test_attendance_csv_has_bom_header_and_display_values():
    row = AttendanceReportRow(
        employee_id="1",
        employee_name="Binh Nguyen",
        employee_code="EMP001",
        work_date=date(2024, 3, 4),
        check_in=datetime(2024, 3, 4, 8, 0),
        check_out=datetime(2024, 3, 4, 17, 45),
        total_hours=Decimal("9.25"),
        regular_hours=Decimal("8"),
        overtime_hours=Decimal("1.25"),
        break_minutes=Decimal("30"),
        late_arrival=False,
        early_departure=False,
    )

    payload = write_attendance_csv([row])

    assert payload.startswith(codecs.BOM_UTF8)
    parsed = list(csv.DictReader(io.StringIO(payload.decode("utf-8-sig"))))
    assert list(parsed[0].keys()) == ATTENDANCE_CSV_FIELDS
    assert parsed[0]["date"] == "03/04/2024"
    assert parsed[0]["total_hours"] == "9.25"
    assert parsed[0]["total_hhmm"] == "09:15"
    assert parsed[0]["check_out"] == "17:45"
    assert parsed[0]["late_arrival"] == "no"


def test_empty_report_is_header_only():
    payload = write_attendance_csv([]).decode("utf-8-sig")

    assert payload.strip() == ",".join(ATTENDANCE_CSV_FIELDS)
