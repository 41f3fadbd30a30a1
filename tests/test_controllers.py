from __future__ import annotations

from datetime import date, datetime

import pytest

from timepunch.container import Container
from timepunch.core.enums import PunchType
from timepunch.core.exceptions import DataSourceError
from timepunch.hours.pipeline import HoursPipeline
from timepunch.main import create_app
from timepunch.payroll.model import PayrollDocument
from timepunch.payroll.service import PayrollReportService
from timepunch.punches.model import PunchEvent
from timepunch.reports.service import TimeReportService
from timepunch.roster.model import Employee


class FakePunchRepo:
    def __init__(self, events=(), *, error=None):
        self._events = list(events)
        self._error = error

    def get_punches(self, *, start_date, end_date, employee_id=None):
        if self._error:
            raise self._error
        return [e for e in self._events if employee_id is None or e.employee_id == employee_id]


class FakeEmployeeRepo:
    def list_employees(self):
        return [Employee(employee_id="1", first_name="Binh", last_name="Nguyen", employee_code="EMP001")]


class FakePayrollRunRepo:
    def __init__(self):
        self.documents = [
            PayrollDocument.from_mapping(
                {"id": 1, "period_start": "2024-03-01", "period_end": "2024-03-15", "status": "approved",
                 "total_gross_pay": "250.00",
                 "calculations": [{"employee_id": "1", "tips_required": "10", "tips_reported": "4",
                                   "tip_credit_shortfall": "6"}]}
            ),
            PayrollDocument.from_mapping(
                {"id": 2, "period_start": "2024-03-01", "period_end": "2024-03-15", "status": "draft",
                 "total_gross_pay": "999.00"}
            ),
        ]

    def list_overlapping(self, *, start, end):
        return self.documents


EVENTS = [
    PunchEvent(employee_id="1", timestamp=datetime(2024, 3, 4, 8, 0), type=PunchType.CHECK_IN),
    PunchEvent(employee_id="1", timestamp=datetime(2024, 3, 4, 17, 0), type=PunchType.CHECK_OUT),
]


def _client(monkeypatch, punches=None):
    monkeypatch.setenv("APP_ENV", "testing")
    pipeline = HoursPipeline()
    punches = punches or FakePunchRepo(EVENTS)
    employees = FakeEmployeeRepo()
    payroll_runs = FakePayrollRunRepo()
    container = Container(
        conn=None,
        punches_repo=punches,
        employees_repo=employees,
        payroll_runs_repo=payroll_runs,
        pipeline=pipeline,
        time_report_service=TimeReportService(punches, employees, pipeline=pipeline),
        payroll_report_service=PayrollReportService(payroll_runs),
    )
    return create_app(container).test_client()


def test_attendance_report_json(monkeypatch):
    resp = _client(monkeypatch).get("/api/reports/attendance?start=2024-03-01&end=2024-03-31")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["rows"][0]["employee_name"] == "Binh Nguyen"
    assert body["rows"][0]["total_hours"] == "9.00"
    assert body["rows"][0]["overtime_hours"] == "1.00"


def test_attendance_csv_download(monkeypatch):
    resp = _client(monkeypatch).get("/api/reports/attendance.csv?start=2024-03-01&end=2024-03-31")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance_20240301_20240331.csv" in resp.headers["Content-Disposition"]
    assert "Binh Nguyen" in resp.data.decode("utf-8-sig")


@pytest.mark.parametrize("group_by", ["employee", "day", "week", "department"])
def test_time_summary_group_by(monkeypatch, group_by):
    resp = _client(monkeypatch).get(f"/api/reports/time-summary?start=2024-03-01&end=2024-03-31&group_by={group_by}")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["group_by"] == group_by
    assert body["totals"]["total_hours"] == "9.00"


def test_employee_time_summary_and_break_compliance(monkeypatch):
    client = _client(monkeypatch)

    summary = client.get("/api/reports/employee-time-summary?start=2024-03-01&end=2024-03-31").get_json()
    alerts = client.get("/api/reports/break-compliance?start=2024-03-01&end=2024-03-31").get_json()

    assert summary["employees"][0]["check_in_count"] == 1
    assert alerts["alerts"][0]["date"] == "2024-03-04"


def test_payroll_report_with_status_filter_and_tips(monkeypatch):
    resp = _client(monkeypatch).get(
        "/api/reports/payroll?start=2024-03-01&end=2024-03-31&status=approved&include_tip_credit_details=true"
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total_gross_pay"] == "250.00"
    assert body["total_employees"] == 1
    assert body["tip_credit_summary"]["total_shortfall"] == "6.00"


def test_invalid_input_maps_to_400(monkeypatch):
    client = _client(monkeypatch)

    bad_date = client.get("/api/reports/attendance?start=2024-13-01&end=2024-03-31")
    inverted = client.get("/api/reports/attendance?start=2024-03-31&end=2024-03-01")
    bad_group = client.get("/api/reports/time-summary?start=2024-03-01&end=2024-03-31&group_by=month")

    for resp in (bad_date, inverted, bad_group):
        assert resp.status_code == 400
        assert resp.get_json()["success"] is False


def test_data_source_failure_maps_to_502(monkeypatch):
    client = _client(monkeypatch, punches=FakePunchRepo(error=DataSourceError("db down")))

    resp = client.get("/api/reports/attendance?start=2024-03-01&end=2024-03-31")

    assert resp.status_code == 502
    assert resp.get_json() == {"success": False, "message": "Data source unavailable"}


def test_missing_dates_default_to_month_to_date(monkeypatch):
    monkeypatch.setattr("timepunch.reports.controller.now_local", lambda: datetime(2024, 3, 18, 10, 0))

    body = _client(monkeypatch).get("/api/reports/attendance").get_json()

    assert body["start_date"] == date(2024, 3, 1).isoformat()
    assert body["end_date"] == "2024-03-18"
