from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ..attendance.model import DailyAttendanceRecord
from ..core.enums import OvertimeBasis


@dataclass(frozen=True)
class HourSplit:
    """Regular/overtime split of one day's hours.

    Report-only: ``basis`` is always the approximate daily threshold, never
    the payable (weekly) overtime computed by the payroll backend.
    """

    regular_hours: Decimal
    overtime_hours: Decimal
    basis: OvertimeBasis = OvertimeBasis.DAILY_THRESHOLD_APPROXIMATE


@dataclass(frozen=True)
class DailyHours:
    """A daily attendance record together with its hour split."""

    record: DailyAttendanceRecord
    split: HourSplit

    @property
    def employee_id(self) -> str:
        return self.record.employee_id

    @property
    def work_date(self) -> date:
        return self.record.work_date

    @property
    def hours_worked(self) -> Decimal:
        return self.record.hours_worked

    @property
    def regular_hours(self) -> Decimal:
        return self.split.regular_hours

    @property
    def overtime_hours(self) -> Decimal:
        return self.split.overtime_hours
