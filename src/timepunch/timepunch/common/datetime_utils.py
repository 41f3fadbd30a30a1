from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Optional

from ..core.constants import HOURS_QUANTUM


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def coerce_datetime(value: Any) -> Optional[datetime]:
    """Best-effort conversion of an external timestamp to a datetime.

    Accepts datetime objects and ISO 8601 strings (a trailing ``Z`` is
    accepted). Anything else, including empty strings, returns None.
    """

    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None

    raw = value.strip()
    if not raw:
        return None
    if raw.endswith("Z") or raw.endswith("z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def coerce_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = coerce_datetime(value)
    return parsed.date() if parsed else None


def wall_clock(value: datetime) -> datetime:
    """Drop tzinfo and keep the local clock reading the timestamp encodes."""
    return value.replace(tzinfo=None) if value.tzinfo is not None else value


def week_start(day: date) -> date:
    """Monday of the ISO week containing ``day`` (Sunday belongs to the previous Monday)."""
    return day - timedelta(days=day.weekday())


def hours_between(start: datetime, end: datetime) -> Decimal:
    """Exact hour difference; sub-second precision is kept via microseconds."""
    delta = end - start
    micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    return Decimal(micros) / Decimal(3_600_000_000)


def minutes_to_hours(minutes: int | Decimal) -> Decimal:
    return Decimal(minutes) / Decimal(60)


def format_hours_hhmm(hours: Decimal) -> str:
    """Render decimal hours as ``HH:MM`` (rounded to the minute)."""
    total_minutes = int((hours * 60).to_integral_value())
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_hours(hours: Decimal) -> str:
    return str(hours.quantize(HOURS_QUANTUM))


def format_date_us(value: date) -> str:
    """US display format (MM/DD/YYYY)."""
    return value.strftime("%m/%d/%Y")


def parse_shift_window(value: Optional[str]) -> Optional[tuple[time, time]]:
    """Parse a regular shift like ``"09:00-17:00"``; returns None when unusable."""

    if not value or "-" not in value:
        return None
    start_s, _, end_s = value.partition("-")
    try:
        start = datetime.strptime(start_s.strip(), "%H:%M").time()
        end = datetime.strptime(end_s.strip(), "%H:%M").time()
    except ValueError:
        return None
    return start, end
