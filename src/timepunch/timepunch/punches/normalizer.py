from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable

from .model import PunchEvent, PunchGroup

logger = logging.getLogger(__name__)


class PunchNormalizer:
    """Group raw punches by (employee, local calendar date), each group sorted.

    Sorting is stable on the wall-clock timestamp, so ties keep input order
    and re-running on the same input yields identical groups.
    """

    def group(self, events: Iterable[PunchEvent]) -> list[PunchGroup]:
        buckets: dict[tuple[str, date], list[PunchEvent]] = defaultdict(list)
        dropped = 0

        for event in events:
            if not event.is_complete:
                dropped += 1
                continue
            buckets[(event.employee_id, event.work_date)].append(event)

        if dropped:
            logger.debug("dropped %d incomplete punch events", dropped)

        groups = []
        for (employee_id, work_date) in sorted(buckets):
            ordered = sorted(buckets[(employee_id, work_date)], key=lambda e: e.local_time)
            groups.append(PunchGroup(employee_id=employee_id, work_date=work_date, events=tuple(ordered)))
        return groups
