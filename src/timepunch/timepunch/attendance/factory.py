from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.datetime_utils import parse_shift_window
from ..core.policy import ReconciliationPolicy
from ..roster.model import Employee
from .strategies.base import PunctualityStrategy
from .strategies.fixed_hours_strategy import FixedHoursStrategy
from .strategies.shift_strategy import ShiftScheduleStrategy


@dataclass
class PunctualityStrategyFactory:
    """Factory Pattern: choose the punctuality rule for an employee."""

    policy: ReconciliationPolicy = field(default_factory=ReconciliationPolicy)

    def default(self) -> PunctualityStrategy:
        return FixedHoursStrategy(
            late_arrival_hour=self.policy.late_arrival_hour,
            early_departure_hour=self.policy.early_departure_hour,
        )

    def for_employee(self, employee: Optional[Employee]) -> PunctualityStrategy:
        window = parse_shift_window(employee.regular_shift) if employee else None
        if not window:
            return self.default()

        start, end = window
        return ShiftScheduleStrategy(start_time=start, end_time=end, grace_minutes=self.policy.late_grace_minutes)
