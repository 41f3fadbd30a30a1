"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_DAILY_OVERTIME_THRESHOLD_HOURS = Decimal("8")
DEFAULT_LATE_ARRIVAL_HOUR = 9
DEFAULT_EARLY_DEPARTURE_HOUR = 17
DEFAULT_UNMATCHED_BREAK_MINUTES = 30
DEFAULT_MAX_SHIFT_HOURS = 24
# A check-in left open at day end is closed by an earlier check-out only if the
# overnight shift this implies is no longer than this.
DEFAULT_MAX_OVERNIGHT_CLOSURE_HOURS = 16
DEFAULT_LATE_GRACE_MINUTES = 0

# Break compliance: 30 minutes of break required for shifts of 8+ hours.
DEFAULT_BREAK_REQUIRED_AFTER_HOURS = Decimal("8")
DEFAULT_REQUIRED_BREAK_MINUTES = 30

UNASSIGNED_DEPARTMENT = "Unassigned"

HOURS_QUANTUM = Decimal("0.01")
MONEY_QUANTUM = Decimal("0.01")
