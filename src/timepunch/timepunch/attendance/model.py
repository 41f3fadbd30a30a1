from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import hours_between


@dataclass(frozen=True)
class BreakInterval:
    start: datetime
    end: datetime

    @property
    def hours(self) -> Decimal:
        return hours_between(self.start, self.end)


@dataclass(frozen=True)
class ShiftPair:
    """A usable check-in/check-out pair. ``check_out`` is the effective time
    (already moved to the next day for overnight shifts)."""

    check_in: datetime
    check_out: datetime
    overnight: bool = False

    @property
    def hours(self) -> Decimal:
        return hours_between(self.check_in, self.check_out)


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công đã đối soát của một ngày.

    Rebuilt on demand from punches, never persisted or mutated.
    """

    employee_id: str
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime]
    breaks: tuple[BreakInterval, ...]
    hours_worked: Decimal
    late_arrival: bool
    early_departure: bool
    unmatched_break_markers: int = 0
    discarded_pairs: int = 0

    @property
    def break_hours(self) -> Decimal:
        return sum((b.hours for b in self.breaks), Decimal("0"))

    @property
    def break_minutes(self) -> Decimal:
        return self.break_hours * 60
