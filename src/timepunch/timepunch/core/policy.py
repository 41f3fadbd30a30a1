from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from types import ModuleType
from typing import Any

from . import constants


@dataclass(frozen=True)
class ReconciliationPolicy:
    """Business-policy knobs for punch reconciliation.

    None of these are physical law: late/early hours, the unmatched-break
    deduction and the daily overtime threshold differ between businesses and
    are injected rather than hard-coded.
    """

    daily_overtime_threshold: Decimal = constants.DEFAULT_DAILY_OVERTIME_THRESHOLD_HOURS
    late_arrival_hour: int = constants.DEFAULT_LATE_ARRIVAL_HOUR
    early_departure_hour: int = constants.DEFAULT_EARLY_DEPARTURE_HOUR
    unmatched_break_minutes: int = constants.DEFAULT_UNMATCHED_BREAK_MINUTES
    max_shift_hours: int = constants.DEFAULT_MAX_SHIFT_HOURS
    max_overnight_closure_hours: int = constants.DEFAULT_MAX_OVERNIGHT_CLOSURE_HOURS
    late_grace_minutes: int = constants.DEFAULT_LATE_GRACE_MINUTES
    break_required_after_hours: Decimal = constants.DEFAULT_BREAK_REQUIRED_AFTER_HOURS
    required_break_minutes: int = constants.DEFAULT_REQUIRED_BREAK_MINUTES
    deduct_matched_breaks: bool = True

    @classmethod
    def from_settings(cls, settings: ModuleType | Any) -> "ReconciliationPolicy":
        """Build a policy from a settings module, falling back to defaults."""

        def _get(name: str, default):
            value = getattr(settings, name, None)
            return default if value is None else value

        return cls(
            daily_overtime_threshold=Decimal(
                str(_get("DAILY_OVERTIME_THRESHOLD_HOURS", constants.DEFAULT_DAILY_OVERTIME_THRESHOLD_HOURS))
            ),
            late_arrival_hour=int(_get("LATE_ARRIVAL_HOUR", constants.DEFAULT_LATE_ARRIVAL_HOUR)),
            early_departure_hour=int(_get("EARLY_DEPARTURE_HOUR", constants.DEFAULT_EARLY_DEPARTURE_HOUR)),
            unmatched_break_minutes=int(_get("UNMATCHED_BREAK_MINUTES", constants.DEFAULT_UNMATCHED_BREAK_MINUTES)),
            max_shift_hours=int(_get("MAX_SHIFT_HOURS", constants.DEFAULT_MAX_SHIFT_HOURS)),
            max_overnight_closure_hours=int(
                _get("MAX_OVERNIGHT_CLOSURE_HOURS", constants.DEFAULT_MAX_OVERNIGHT_CLOSURE_HOURS)
            ),
            late_grace_minutes=int(_get("LATE_GRACE_MINUTES", constants.DEFAULT_LATE_GRACE_MINUTES)),
            break_required_after_hours=Decimal(
                str(_get("BREAK_REQUIRED_AFTER_HOURS", constants.DEFAULT_BREAK_REQUIRED_AFTER_HOURS))
            ),
            required_break_minutes=int(_get("REQUIRED_BREAK_MINUTES", constants.DEFAULT_REQUIRED_BREAK_MINUTES)),
            deduct_matched_breaks=bool(_get("DEDUCT_MATCHED_BREAKS", True)),
        )
