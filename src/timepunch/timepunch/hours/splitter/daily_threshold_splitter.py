from __future__ import annotations

from decimal import Decimal

from ...core.constants import DEFAULT_DAILY_OVERTIME_THRESHOLD_HOURS
from ..model import HourSplit
from .base import HoursSplitter

ZERO = Decimal("0")


class DailyThresholdSplitter(HoursSplitter):
    """Daily rule: regular = min(hours, threshold), overtime = the rest (not below 0).

    Approximation for display only; weekly over-40 overtime lives in the
    payroll backend.
    """

    def __init__(self, daily_threshold: Decimal = DEFAULT_DAILY_OVERTIME_THRESHOLD_HOURS):
        self.daily_threshold = Decimal(daily_threshold)

    def split(self, hours_worked: Decimal) -> HourSplit:
        hours = max(Decimal(hours_worked), ZERO)
        regular = min(hours, self.daily_threshold)
        overtime = max(ZERO, hours - self.daily_threshold)
        return HourSplit(regular_hours=regular, overtime_hours=overtime)
