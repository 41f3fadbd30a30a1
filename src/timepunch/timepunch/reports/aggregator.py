from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import week_start
from ..core.constants import UNASSIGNED_DEPARTMENT
from ..core.enums import GroupBy
from ..hours.model import DailyHours
from ..roster.model import Roster
from .model import PeriodSummaryRow

ZERO = Decimal("0")


@dataclass
class _Bucket:
    label: str
    total: Decimal = ZERO
    regular: Decimal = ZERO
    overtime: Decimal = ZERO
    days: int = 0


class PeriodAggregator:
    """Fold hour-split daily records into one row per group key.

    Keys: employee id, ISO date, ISO date of the Monday week start, or
    department name. Rows come back sorted by display name for ``employee``
    and by key otherwise. Employees without records produce no rows.
    """

    def aggregate(
        self,
        days: Iterable[DailyHours],
        group_by: GroupBy,
        *,
        roster: Optional[Roster] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[PeriodSummaryRow]:
        roster = roster or Roster()
        buckets: dict[str, _Bucket] = {}

        for d in days:
            if start and d.work_date < start:
                continue
            if end and d.work_date > end:
                continue

            key, label = self._key_for(d, group_by, roster)
            b = buckets.get(key)
            if b is None:
                b = _Bucket(label=label)
                buckets[key] = b
            b.total += d.hours_worked
            b.regular += d.regular_hours
            b.overtime += d.overtime_hours
            b.days += 1

        rows = [
            PeriodSummaryRow(
                group_key=key,
                label=b.label,
                total_hours=b.total,
                regular_hours=b.regular,
                overtime_hours=b.overtime,
                days=b.days,
            )
            for key, b in buckets.items()
        ]

        if group_by == GroupBy.EMPLOYEE:
            rows.sort(key=lambda r: (r.label, r.group_key))
        else:
            rows.sort(key=lambda r: r.group_key)
        return rows

    @staticmethod
    def _key_for(d: DailyHours, group_by: GroupBy, roster: Roster) -> tuple[str, str]:
        if group_by == GroupBy.EMPLOYEE:
            return d.employee_id, roster.display_name(d.employee_id)
        if group_by == GroupBy.DAY:
            key = d.work_date.isoformat()
            return key, key
        if group_by == GroupBy.WEEK:
            key = week_start(d.work_date).isoformat()
            return key, key
        if group_by == GroupBy.DEPARTMENT:
            dept = roster.department(d.employee_id) or UNASSIGNED_DEPARTMENT
            return dept, dept
        raise ValueError(f"unsupported group_by: {group_by!r}")


def totals(rows: Iterable[PeriodSummaryRow]) -> tuple[Decimal, Decimal, Decimal]:
    """Grand totals (total, regular, overtime) across summary rows."""
    total = regular = overtime = ZERO
    for r in rows:
        total += r.total_hours
        regular += r.regular_hours
        overtime += r.overtime_hours
    return total, regular, overtime
