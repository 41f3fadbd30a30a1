from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import MONEY_QUANTUM

ZERO = Decimal("0")


def parse_amount(value: Any) -> Decimal:
    """Parse an externally supplied amount; never raises.

    Payroll documents carry money and hours as strings (``"1234.50"``,
    sometimes ``"$1,234.50"``), numbers, or nothing at all. Unparsable,
    empty or non-finite values normalize to 0.
    """

    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        value = repr(value)
    if not isinstance(value, str):
        return ZERO

    raw = value.strip().replace(",", "").replace("$", "")
    if not raw:
        return ZERO
    try:
        parsed = Decimal(raw)
    except InvalidOperation:
        return ZERO
    return parsed if parsed.is_finite() else ZERO


def has_amount(value: Any) -> bool:
    """True when a source field is present (not None and not an empty string)."""
    if value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def format_money(value: Decimal) -> str:
    return str(value.quantize(MONEY_QUANTUM))
