from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import coerce_datetime, wall_clock
from ..core.enums import PunchType


@dataclass(frozen=True)
class PunchEvent:
    """Thực thể miền (domain): Một lần chấm công thô (clock event).

    Sourced externally and never trusted: employee id or timestamp may be
    missing, and events arrive in no particular order.
    """

    employee_id: Optional[str]
    timestamp: Optional[datetime]
    type: Optional[PunchType]

    @property
    def local_time(self) -> Optional[datetime]:
        """Wall-clock reading used for ordering and day attribution."""
        return wall_clock(self.timestamp) if self.timestamp is not None else None

    @property
    def work_date(self) -> Optional[date]:
        local = self.local_time
        return local.date() if local is not None else None

    @property
    def is_complete(self) -> bool:
        return bool(self.employee_id) and self.timestamp is not None and self.type is not None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PunchEvent":
        """Build from a punch-source record.

        The time-entry API used ``record_time``/``record_type`` on reads and
        ``timestamp``/``type`` on writes; both spellings are accepted.
        """

        employee_id = raw.get("employee_id")
        if employee_id is not None:
            employee_id = str(employee_id).strip() or None
        timestamp = raw.get("record_time")
        if timestamp is None:
            timestamp = raw.get("timestamp")
        kind = raw.get("record_type")
        if kind is None:
            kind = raw.get("type")

        return cls(
            employee_id=employee_id,
            timestamp=coerce_datetime(timestamp),
            type=_coerce_punch_type(kind),
        )


def _coerce_punch_type(value: Any) -> Optional[PunchType]:
    if isinstance(value, PunchType):
        return value
    if not isinstance(value, str):
        return None
    try:
        return PunchType(value.strip().lower())
    except ValueError:
        return None


@dataclass(frozen=True)
class PunchGroup:
    """Các lần chấm công của một nhân viên trong một ngày, đã sắp xếp."""

    employee_id: str
    work_date: date
    events: tuple[PunchEvent, ...]
