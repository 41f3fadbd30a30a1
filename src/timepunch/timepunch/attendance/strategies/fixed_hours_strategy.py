from __future__ import annotations

from datetime import date, datetime

from .base import PunctualityStrategy


class FixedHoursStrategy(PunctualityStrategy):
    """Business-wide hours: late if the first check-in hour >= late hour,
    early if the last check-out hour < departure hour."""

    def __init__(self, *, late_arrival_hour: int = 9, early_departure_hour: int = 17):
        self.late_arrival_hour = int(late_arrival_hour)
        self.early_departure_hour = int(early_departure_hour)

    def is_late(self, *, work_date: date, first_check_in: datetime) -> bool:
        return first_check_in.hour >= self.late_arrival_hour

    def is_early_departure(self, *, work_date: date, last_check_out: datetime) -> bool:
        return last_check_out.hour < self.early_departure_hour
