from __future__ import annotations

from datetime import date, datetime, time, timedelta

from .base import PunctualityStrategy


class ShiftScheduleStrategy(PunctualityStrategy):
    """Employee's regular shift: late after start + grace, early before end.

    A shift whose end is not after its start (e.g. 22:00-06:00) ends on the
    following day.
    """

    def __init__(self, *, start_time: time, end_time: time, grace_minutes: int = 0):
        self.start_time = start_time
        self.end_time = end_time
        self.grace_minutes = int(grace_minutes)

    def is_late(self, *, work_date: date, first_check_in: datetime) -> bool:
        shift_start = datetime.combine(work_date, self.start_time)
        return first_check_in > shift_start + timedelta(minutes=self.grace_minutes)

    def is_early_departure(self, *, work_date: date, last_check_out: datetime) -> bool:
        shift_end = datetime.combine(work_date, self.end_time)
        if self.end_time <= self.start_time:
            shift_end += timedelta(days=1)
        return last_check_out < shift_end
