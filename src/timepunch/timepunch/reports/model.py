from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import format_hours
from ..core.enums import GroupBy, OvertimeBasis

ZERO = Decimal("0")


def _clock(value: Optional[datetime]) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


@dataclass(frozen=True)
class PeriodSummaryRow:
    """Read-model: một dòng tổng hợp giờ công theo nhóm (nhân viên/ngày/tuần/phòng ban)."""

    group_key: str
    label: str
    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
    days: int = 0
    overtime_basis: OvertimeBasis = OvertimeBasis.DAILY_THRESHOLD_APPROXIMATE

    def to_dict(self) -> dict:
        return {
            "group_key": self.group_key,
            "label": self.label,
            "total_hours": format_hours(self.total_hours),
            "regular_hours": format_hours(self.regular_hours),
            "overtime_hours": format_hours(self.overtime_hours),
            "days": self.days,
            "overtime_basis": self.overtime_basis.value,
        }


@dataclass(frozen=True)
class TimeSummaryReport:
    group_by: GroupBy
    start: date
    end: date
    rows: list[PeriodSummaryRow]
    total_hours: Decimal = ZERO
    regular_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "group_by": self.group_by.value,
            "start_date": self.start.isoformat(),
            "end_date": self.end.isoformat(),
            "rows": [r.to_dict() for r in self.rows],
            "totals": {
                "total_hours": format_hours(self.total_hours),
                "regular_hours": format_hours(self.regular_hours),
                "overtime_hours": format_hours(self.overtime_hours),
            },
            "overtime_basis": OvertimeBasis.DAILY_THRESHOLD_APPROXIMATE.value,
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model phục vụ báo cáo chấm công (một dòng / nhân viên / ngày)."""

    employee_id: str
    employee_name: str
    employee_code: str
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    total_hours: Decimal
    regular_hours: Decimal
    overtime_hours: Decimal
    break_minutes: Decimal
    late_arrival: bool
    early_departure: bool

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "employee_code": self.employee_code,
            "date": self.work_date.isoformat(),
            "check_in": _clock(self.check_in),
            "check_out": _clock(self.check_out),
            "total_hours": format_hours(self.total_hours),
            "regular_hours": format_hours(self.regular_hours),
            "overtime_hours": format_hours(self.overtime_hours),
            "break_minutes": int(self.break_minutes.to_integral_value()),
            "late_arrival": self.late_arrival,
            "early_departure": self.early_departure,
        }


@dataclass
class EmployeeTimeSummary:
    """Per-employee totals plus raw punch counts for the time-tracking screen."""

    employee_id: str
    employee_code: str
    employee_name: str
    regular_hours: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    break_hours: Decimal = ZERO
    total_work_hours: Decimal = ZERO
    check_in_count: int = 0
    check_out_count: int = 0
    break_start_count: int = 0
    break_end_count: int = 0

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_code": self.employee_code,
            "employee_name": self.employee_name,
            "regular_hours": format_hours(self.regular_hours),
            "overtime_hours": format_hours(self.overtime_hours),
            "break_hours": format_hours(self.break_hours),
            "total_work_hours": format_hours(self.total_work_hours),
            "check_in_count": self.check_in_count,
            "check_out_count": self.check_out_count,
            "break_start_count": self.break_start_count,
            "break_end_count": self.break_end_count,
        }


@dataclass(frozen=True)
class BreakComplianceAlert:
    employee_id: str
    employee_name: str
    work_date: date
    hours_worked: Decimal
    break_minutes_taken: Decimal
    required_break_minutes: int
    unmatched_break_markers: int = 0

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "date": self.work_date.isoformat(),
            "hours_worked": format_hours(self.hours_worked),
            "break_minutes_taken": int(self.break_minutes_taken.to_integral_value()),
            "required_break_minutes": self.required_break_minutes,
            "unmatched_break_markers": self.unmatched_break_markers,
        }
