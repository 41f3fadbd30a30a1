from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from timepunch.core.enums import GroupBy, PunchType
from timepunch.core.exceptions import DataSourceError, ValidationError
from timepunch.punches.model import PunchEvent
from timepunch.reports.service import TimeReportService
from timepunch.roster.model import Employee


class FakePunchRepo:
    def __init__(self, events):
        self._events = events
        self.last_args = None

    def get_punches(self, *, start_date: date, end_date: date, employee_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "employee_id": employee_id}
        return [e for e in self._events if employee_id is None or e.employee_id == employee_id]


class FakeEmployeeRepo:
    def __init__(self, employees=()):
        self._employees = list(employees)

    def list_employees(self):
        return self._employees


class FailingPunchRepo:
    def get_punches(self, *, start_date, end_date, employee_id=None):
        raise DataSourceError("time entries unavailable")


def _p(emp, day, hh, mm, kind):
    return PunchEvent(employee_id=emp, timestamp=datetime(2024, 3, day, hh, mm), type=kind)


EVENTS = [
    _p("1", 4, 8, 0, PunchType.CHECK_IN),
    _p("1", 4, 12, 0, PunchType.BREAK_START),
    _p("1", 4, 12, 30, PunchType.BREAK_END),
    _p("1", 4, 18, 0, PunchType.CHECK_OUT),
    _p("2", 4, 9, 30, PunchType.CHECK_IN),
    _p("2", 4, 19, 0, PunchType.CHECK_OUT),
    _p("2", 5, 9, 0, PunchType.CHECK_IN),
    _p("2", 5, 12, 0, PunchType.CHECK_OUT),
]

EMPLOYEES = [
    Employee(employee_id="1", first_name="Binh", last_name="Nguyen", employee_code="EMP001", department="Kitchen"),
    Employee(employee_id="2", first_name="An", last_name="Tran", employee_code="EMP002", department="Front"),
]


def _service(events=EVENTS):
    return TimeReportService(FakePunchRepo(events), FakeEmployeeRepo(EMPLOYEES))


def test_attendance_report_rows_sorted_by_date_then_name():
    rows = _service().build_attendance_report(start=date(2024, 3, 4), end=date(2024, 3, 5))

    assert [(r.work_date, r.employee_name) for r in rows] == [
        (date(2024, 3, 4), "An Tran"),
        (date(2024, 3, 4), "Binh Nguyen"),
        (date(2024, 3, 5), "An Tran"),
    ]
    binh = rows[1].to_dict()
    assert binh["total_hours"] == "9.50"
    assert binh["regular_hours"] == "8.00"
    assert binh["overtime_hours"] == "1.50"
    assert binh["break_minutes"] == 30
    assert binh["check_in"] == "08:00"
    assert rows[0].late_arrival is True


def test_report_forwards_employee_filter():
    repo = FakePunchRepo(EVENTS)
    svc = TimeReportService(repo, FakeEmployeeRepo(EMPLOYEES))

    rows = svc.build_attendance_report(start=date(2024, 3, 1), end=date(2024, 3, 31), employee_id="2")

    assert repo.last_args["employee_id"] == "2"
    assert {r.employee_id for r in rows} == {"2"}


def test_time_summary_totals_match_rows():
    report = _service().build_time_summary(start=date(2024, 3, 4), end=date(2024, 3, 5), group_by=GroupBy.EMPLOYEE)

    assert [r.label for r in report.rows] == ["An Tran", "Binh Nguyen"]
    assert report.total_hours == Decimal("9.5") + Decimal("9.5") + Decimal("3")
    assert report.regular_hours + report.overtime_hours == report.total_hours
    assert report.to_dict()["overtime_basis"] == "daily_threshold_approximate"


def test_employee_time_summary_counts_punches():
    summaries = _service().build_employee_time_summaries(start=date(2024, 3, 4), end=date(2024, 3, 5))

    binh = next(s for s in summaries if s.employee_id == "1")
    assert binh.employee_code == "EMP001"
    assert binh.check_in_count == 1
    assert binh.break_start_count == 1
    assert binh.break_end_count == 1
    assert binh.break_hours == Decimal("0.5")
    assert binh.total_work_hours == Decimal("9.5")

    an = next(s for s in summaries if s.employee_id == "2")
    assert an.check_in_count == 2
    assert an.check_out_count == 2


def test_break_compliance_flags_long_days_without_break():
    alerts = _service().build_break_compliance_alerts(start=date(2024, 3, 4), end=date(2024, 3, 5))

    assert [(a.employee_id, a.work_date) for a in alerts] == [("2", date(2024, 3, 4))]
    assert alerts[0].break_minutes_taken == 0
    assert alerts[0].required_break_minutes == 30


def test_inverted_range_is_rejected():
    with pytest.raises(ValidationError):
        _service().build_attendance_report(start=date(2024, 3, 5), end=date(2024, 3, 4))


def test_fetch_failure_propagates():
    svc = TimeReportService(FailingPunchRepo(), FakeEmployeeRepo())

    with pytest.raises(DataSourceError):
        svc.build_time_summary(start=date(2024, 3, 4), end=date(2024, 3, 5), group_by=GroupBy.DAY)
