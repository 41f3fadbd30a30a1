from decimal import Decimal

from timepunch.core.enums import OvertimeBasis
from timepunch.hours.splitter.daily_threshold_splitter import DailyThresholdSplitter


def test_hours_under_threshold_are_all_regular():
    split = DailyThresholdSplitter().split(Decimal("7.5"))

    assert split.regular_hours == Decimal("7.5")
    assert split.overtime_hours == 0


def test_hours_over_threshold_spill_into_overtime():
    split = DailyThresholdSplitter().split(Decimal("10.25"))

    assert split.regular_hours == 8
    assert split.overtime_hours == Decimal("2.25")
    assert split.regular_hours + split.overtime_hours == Decimal("10.25")
    assert split.basis == OvertimeBasis.DAILY_THRESHOLD_APPROXIMATE


def test_threshold_is_configurable():
    split = DailyThresholdSplitter(Decimal("10")).split(Decimal("10.25"))

    assert split.regular_hours == 10
    assert split.overtime_hours == Decimal("0.25")


def test_exact_threshold_has_no_overtime():
    split = DailyThresholdSplitter().split(Decimal("8"))

    assert split.overtime_hours == 0
