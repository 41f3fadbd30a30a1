from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import require_date_range
from ..core.enums import GroupBy, PunchType
from ..hours.model import DailyHours
from ..hours.pipeline import HoursPipeline
from ..punches.model import PunchEvent
from ..punches.repository import PunchRepository
from ..roster.model import Roster
from ..roster.repository import EmployeeRepository
from .aggregator import PeriodAggregator, totals
from .model import (
    AttendanceReportRow,
    BreakComplianceAlert,
    EmployeeTimeSummary,
    TimeSummaryReport,
)

logger = logging.getLogger(__name__)

_COUNT_FIELDS = {
    PunchType.CHECK_IN: "check_in_count",
    PunchType.CHECK_OUT: "check_out_count",
    PunchType.BREAK_START: "break_start_count",
    PunchType.BREAK_END: "break_end_count",
}


class TimeReportService:
    """Attendance, time-summary and break-compliance reports over punches.

    Fetches punches and the roster through repositories, then hands them to
    the pure HoursPipeline. Fetch failures propagate to the caller.
    """

    def __init__(
        self,
        punches: PunchRepository,
        employees: EmployeeRepository,
        *,
        pipeline: Optional[HoursPipeline] = None,
        aggregator: Optional[PeriodAggregator] = None,
    ):
        self._punches = punches
        self._employees = employees
        self._pipeline = pipeline or HoursPipeline()
        self._aggregator = aggregator or PeriodAggregator()

    def _load(
        self, *, start: date, end: date, employee_id: Optional[str] = None
    ) -> tuple[Sequence[PunchEvent], list[DailyHours], Roster]:
        require_date_range(start, end)
        events = self._punches.get_punches(start_date=start, end_date=end, employee_id=employee_id)
        roster = Roster(self._employees.list_employees())
        days = self._pipeline.run(events, roster=roster, start=start, end=end)
        if employee_id:
            days = [d for d in days if d.employee_id == employee_id]
        logger.info(
            "reconciled %d punches into %d daily records (%s..%s)", len(events), len(days), start, end
        )
        return events, days, roster

    def build_attendance_report(
        self, *, start: date, end: date, employee_id: Optional[str] = None
    ) -> list[AttendanceReportRow]:
        _, days, roster = self._load(start=start, end=end, employee_id=employee_id)

        rows = [
            AttendanceReportRow(
                employee_id=d.employee_id,
                employee_name=roster.display_name(d.employee_id),
                employee_code=roster.employee_code(d.employee_id),
                work_date=d.work_date,
                check_in=d.record.check_in,
                check_out=d.record.check_out,
                total_hours=d.hours_worked,
                regular_hours=d.regular_hours,
                overtime_hours=d.overtime_hours,
                break_minutes=d.record.break_minutes,
                late_arrival=d.record.late_arrival,
                early_departure=d.record.early_departure,
            )
            for d in days
        ]
        rows.sort(key=lambda r: (r.work_date, r.employee_name, r.employee_id))
        return rows

    def build_time_summary(self, *, start: date, end: date, group_by: GroupBy) -> TimeSummaryReport:
        _, days, roster = self._load(start=start, end=end)
        rows = self._aggregator.aggregate(days, group_by, roster=roster, start=start, end=end)
        total, regular, overtime = totals(rows)
        return TimeSummaryReport(
            group_by=group_by,
            start=start,
            end=end,
            rows=rows,
            total_hours=total,
            regular_hours=regular,
            overtime_hours=overtime,
        )

    def build_employee_time_summaries(
        self, *, start: date, end: date, employee_id: Optional[str] = None
    ) -> list[EmployeeTimeSummary]:
        events, days, roster = self._load(start=start, end=end, employee_id=employee_id)
        summaries: dict[str, EmployeeTimeSummary] = {}

        def _get(emp_id: str) -> EmployeeTimeSummary:
            s = summaries.get(emp_id)
            if s is None:
                s = EmployeeTimeSummary(
                    employee_id=emp_id,
                    employee_code=roster.employee_code(emp_id),
                    employee_name=roster.display_name(emp_id),
                )
                summaries[emp_id] = s
            return s

        for e in events:
            if not e.is_complete or not (start <= e.work_date <= end):
                continue
            if employee_id and e.employee_id != employee_id:
                continue
            s = _get(e.employee_id)
            attr = _COUNT_FIELDS[e.type]
            setattr(s, attr, getattr(s, attr) + 1)

        for d in days:
            s = _get(d.employee_id)
            s.regular_hours += d.regular_hours
            s.overtime_hours += d.overtime_hours
            s.break_hours += d.record.break_hours
            s.total_work_hours += d.hours_worked

        return sorted(summaries.values(), key=lambda s: (s.employee_name, s.employee_id))

    def build_break_compliance_alerts(self, *, start: date, end: date) -> list[BreakComplianceAlert]:
        """Days at or above the break threshold whose matched breaks fall short."""

        _, days, roster = self._load(start=start, end=end)
        policy = self._pipeline.policy
        required = Decimal(policy.required_break_minutes)

        alerts = []
        for d in days:
            if d.hours_worked < policy.break_required_after_hours:
                continue
            taken = d.record.break_minutes
            if taken >= required:
                continue
            alerts.append(
                BreakComplianceAlert(
                    employee_id=d.employee_id,
                    employee_name=roster.display_name(d.employee_id),
                    work_date=d.work_date,
                    hours_worked=d.hours_worked,
                    break_minutes_taken=taken,
                    required_break_minutes=policy.required_break_minutes,
                    unmatched_break_markers=d.record.unmatched_break_markers,
                )
            )
        return alerts
