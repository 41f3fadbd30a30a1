from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import minutes_to_hours
from ..core.enums import PunchType
from ..core.policy import ReconciliationPolicy
from ..punches.model import PunchGroup
from .model import DailyAttendanceRecord
from .pairing import PunchPairingMachine
from .strategies.base import PunctualityStrategy
from .strategies.fixed_hours_strategy import FixedHoursStrategy

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class DailyRecordBuilder:
    """Turn one sorted employee-day punch group into at most one record.

    hours_worked = sum(usable pairs) - matched breaks - unmatched break
    markers * policy.unmatched_break_minutes, floored at 0. Groups with no
    usable pair and no matched break produce no record.
    """

    def __init__(self, policy: Optional[ReconciliationPolicy] = None):
        self._policy = policy or ReconciliationPolicy()

    def build(
        self,
        group: PunchGroup,
        *,
        punctuality: Optional[PunctualityStrategy] = None,
    ) -> Optional[DailyAttendanceRecord]:
        machine = PunchPairingMachine(
            max_shift_hours=self._policy.max_shift_hours,
            max_overnight_closure_hours=self._policy.max_overnight_closure_hours,
        )
        first_check_in = None
        last_raw_check_out = None

        for event in group.events:
            at = event.local_time
            if event.type == PunchType.CHECK_IN and first_check_in is None:
                first_check_in = at
            elif event.type == PunchType.CHECK_OUT:
                last_raw_check_out = at
            machine.feed(event.type, at)
        machine.finish()

        if machine.discarded_pairs:
            logger.debug(
                "employee %s on %s: %d malformed pair(s) discarded",
                group.employee_id,
                group.work_date,
                machine.discarded_pairs,
            )

        if not machine.pairs and not machine.breaks:
            return None

        worked = sum((p.hours for p in machine.pairs), ZERO)
        if self._policy.deduct_matched_breaks:
            worked -= sum((b.hours for b in machine.breaks), ZERO)
        worked -= machine.unmatched_break_markers * minutes_to_hours(self._policy.unmatched_break_minutes)
        worked = max(worked, ZERO)

        if machine.pairs:
            last_check_out = max(p.check_out for p in machine.pairs)
        else:
            last_check_out = last_raw_check_out

        strategy = punctuality or FixedHoursStrategy(
            late_arrival_hour=self._policy.late_arrival_hour,
            early_departure_hour=self._policy.early_departure_hour,
        )
        late = strategy.is_late(work_date=group.work_date, first_check_in=first_check_in) if first_check_in else False
        early = (
            strategy.is_early_departure(work_date=group.work_date, last_check_out=last_check_out)
            if last_check_out
            else False
        )

        return DailyAttendanceRecord(
            employee_id=group.employee_id,
            work_date=group.work_date,
            check_in=first_check_in,
            check_out=last_check_out,
            breaks=tuple(machine.breaks),
            hours_worked=worked,
            late_arrival=late,
            early_departure=early,
            unmatched_break_markers=machine.unmatched_break_markers,
            discarded_pairs=machine.discarded_pairs,
        )
