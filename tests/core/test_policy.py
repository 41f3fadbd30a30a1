from decimal import Decimal
from types import SimpleNamespace

from timepunch.core.policy import ReconciliationPolicy


def test_policy_defaults():
    policy = ReconciliationPolicy()

    assert policy.daily_overtime_threshold == Decimal("8")
    assert policy.late_arrival_hour == 9
    assert policy.early_departure_hour == 17
    assert policy.unmatched_break_minutes == 30


def test_policy_from_settings_module():
    settings = SimpleNamespace(
        DAILY_OVERTIME_THRESHOLD_HOURS="7.5",
        LATE_ARRIVAL_HOUR="10",
        UNMATCHED_BREAK_MINUTES=15,
        DEDUCT_MATCHED_BREAKS=False,
    )

    policy = ReconciliationPolicy.from_settings(settings)

    assert policy.daily_overtime_threshold == Decimal("7.5")
    assert policy.late_arrival_hour == 10
    assert policy.unmatched_break_minutes == 15
    assert policy.deduct_matched_breaks is False
    assert policy.max_shift_hours == 24


def test_overnight_closure_bound_from_settings():
    assert ReconciliationPolicy().max_overnight_closure_hours == 16

    policy = ReconciliationPolicy.from_settings(SimpleNamespace(MAX_OVERNIGHT_CLOSURE_HOURS="10"))

    assert policy.max_overnight_closure_hours == 10
