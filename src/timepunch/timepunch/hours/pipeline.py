from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..attendance.builder import DailyRecordBuilder
from ..attendance.factory import PunctualityStrategyFactory
from ..core.policy import ReconciliationPolicy
from ..punches.model import PunchEvent
from ..punches.normalizer import PunchNormalizer
from ..roster.model import Roster
from .model import DailyHours
from .splitter.base import HoursSplitter
from .splitter.daily_threshold_splitter import DailyThresholdSplitter


class HoursPipeline:
    """punches -> normalize -> daily records -> hour split.

    The one place the per-day regular/overtime split is computed; every
    report (attendance, time summary, compliance) goes through here.
    Pure function of its inputs: same punches, same output.

    Punches are grouped strictly by calendar date. A night shift punched as it
    happens (check-in 22:00 on D, check-out 06:00 on D+1) is split across two
    groups, leaving a dangling check-in and a lone check-out, so it counts zero
    hours on both days. Only a shift whose check-out is stamped on the
    check-in's own date is counted as overnight.
    """

    def __init__(
        self,
        policy: Optional[ReconciliationPolicy] = None,
        *,
        normalizer: Optional[PunchNormalizer] = None,
        builder: Optional[DailyRecordBuilder] = None,
        splitter: Optional[HoursSplitter] = None,
        strategy_factory: Optional[PunctualityStrategyFactory] = None,
    ):
        self._policy = policy or ReconciliationPolicy()
        self._normalizer = normalizer or PunchNormalizer()
        self._builder = builder or DailyRecordBuilder(self._policy)
        self._splitter = splitter or DailyThresholdSplitter(self._policy.daily_overtime_threshold)
        self._strategies = strategy_factory or PunctualityStrategyFactory(self._policy)

    @property
    def policy(self) -> ReconciliationPolicy:
        return self._policy

    def run(
        self,
        events: Iterable[PunchEvent],
        *,
        roster: Optional[Roster] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[DailyHours]:
        """Daily hours ordered by (date, employee id), optionally clipped to [start, end]."""

        roster = roster or Roster()
        out: list[DailyHours] = []

        for group in self._normalizer.group(events):
            if start and group.work_date < start:
                continue
            if end and group.work_date > end:
                continue

            strategy = self._strategies.for_employee(roster.get(group.employee_id))
            record = self._builder.build(group, punctuality=strategy)
            if record is None:
                continue
            out.append(DailyHours(record=record, split=self._splitter.split(record.hours_worked)))

        out.sort(key=lambda d: (d.work_date, d.employee_id))
        return out
