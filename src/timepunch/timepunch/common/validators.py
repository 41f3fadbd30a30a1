from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import GroupBy
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_date(value: Optional[str], field_name: str) -> date:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required (YYYY-MM-DD)")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date: {value!r}") from None


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError(f"start ({start.isoformat()}) must not be after end ({end.isoformat()})")
    return start, end


def require_group_by(value: Optional[str]) -> GroupBy:
    try:
        return GroupBy((value or "").strip().lower())
    except ValueError:
        allowed = ", ".join(g.value for g in GroupBy)
        raise ValidationError(f"group_by must be one of: {allowed}") from None


def resolve_report_range(start: Optional[str], end: Optional[str], *, today: date) -> tuple[date, date]:
    """Query-string dates; a missing bound defaults to the current month to date."""

    start_d = require_date(start, "start") if start else today.replace(day=1)
    end_d = require_date(end, "end") if end else today
    return require_date_range(start_d, end_d)


def parse_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}
