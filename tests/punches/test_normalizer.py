from datetime import date, datetime, timedelta, timezone

from timepunch.core.enums import PunchType
from timepunch.punches.model import PunchEvent
from timepunch.punches.normalizer import PunchNormalizer


def _p(emp, ts, kind):
    return PunchEvent(employee_id=emp, timestamp=ts, type=kind)


def test_groups_by_employee_and_day_sorted_by_time():
    events = [
        _p("E2", datetime(2024, 3, 4, 9, 0), PunchType.CHECK_IN),
        _p("E1", datetime(2024, 3, 4, 17, 0), PunchType.CHECK_OUT),
        _p("E1", datetime(2024, 3, 5, 9, 0), PunchType.CHECK_IN),
        _p("E1", datetime(2024, 3, 4, 9, 0), PunchType.CHECK_IN),
    ]

    groups = PunchNormalizer().group(events)

    assert [(g.employee_id, g.work_date) for g in groups] == [
        ("E1", date(2024, 3, 4)),
        ("E1", date(2024, 3, 5)),
        ("E2", date(2024, 3, 4)),
    ]
    first = groups[0]
    assert [e.type for e in first.events] == [PunchType.CHECK_IN, PunchType.CHECK_OUT]


def test_incomplete_events_are_dropped():
    events = [
        _p(None, datetime(2024, 3, 4, 9, 0), PunchType.CHECK_IN),
        _p("E1", None, PunchType.CHECK_IN),
        _p("E1", datetime(2024, 3, 4, 9, 0), None),
        _p("E1", datetime(2024, 3, 4, 9, 0), PunchType.CHECK_IN),
    ]

    groups = PunchNormalizer().group(events)

    assert len(groups) == 1
    assert len(groups[0].events) == 1


def test_sort_is_stable_for_identical_timestamps():
    at = datetime(2024, 3, 4, 12, 0)
    events = [
        _p("E1", at, PunchType.BREAK_END),
        _p("E1", at, PunchType.BREAK_START),
    ]

    group = PunchNormalizer().group(events)[0]

    assert [e.type for e in group.events] == [PunchType.BREAK_END, PunchType.BREAK_START]


def test_day_attribution_uses_wall_clock_reading():
    # 23:30 at UTC-5 stays on the 4th even though it is the 5th in UTC.
    tz = timezone(timedelta(hours=-5))
    event = _p("E1", datetime(2024, 3, 4, 23, 30, tzinfo=tz), PunchType.CHECK_IN)

    group = PunchNormalizer().group([event])[0]

    assert group.work_date == date(2024, 3, 4)


def test_same_input_yields_identical_groups():
    events = [
        _p("E1", datetime(2024, 3, 4, 17, 0), PunchType.CHECK_OUT),
        _p("E1", datetime(2024, 3, 4, 9, 0), PunchType.CHECK_IN),
    ]
    normalizer = PunchNormalizer()

    assert normalizer.group(events) == normalizer.group(list(events))


def test_from_mapping_accepts_both_field_spellings():
    read_shape = PunchEvent.from_mapping(
        {"employee_id": " 42 ", "record_time": "2024-03-04T09:00:00Z", "record_type": "check_in"}
    )
    write_shape = PunchEvent.from_mapping(
        {"employee_id": 42, "timestamp": "2024-03-04T09:00:00", "type": "CHECK_OUT"}
    )

    assert read_shape.employee_id == "42"
    assert read_shape.type == PunchType.CHECK_IN
    assert read_shape.work_date == date(2024, 3, 4)
    assert write_shape.type == PunchType.CHECK_OUT
    assert write_shape.is_complete


def test_from_mapping_tolerates_garbage():
    event = PunchEvent.from_mapping({"employee_id": "", "record_time": "not a time", "record_type": "lunch"})

    assert event.employee_id is None
    assert event.timestamp is None
    assert event.type is None
    assert not event.is_complete
