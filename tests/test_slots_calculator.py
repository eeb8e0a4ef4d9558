from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from client.app.services.slots import BookingConfig, FixedClock, compute_time_slots
from conftest import NOW, avail

MONDAY = date(2026, 10, 19)
TUESDAY = date(2026, 10, 20)
TODAY = NOW.date()  # Wednesday


def _starts(slots):
    return [slot.start.time() for slot in slots]


def _at(day: date, hh: int, mm: int = 0) -> datetime:
    return datetime.combine(day, time(hh, mm), tzinfo=timezone.utc)


def test_one_hour_slots_at_half_hour_stride(clock):
    slots = compute_time_slots([avail("MONDAY", "09:00", "12:00")], MONDAY, 60, clock)

    assert [(s.start, s.end) for s in slots] == [
        (_at(MONDAY, 9), _at(MONDAY, 10)),
        (_at(MONDAY, 9, 30), _at(MONDAY, 10, 30)),
        (_at(MONDAY, 10), _at(MONDAY, 11)),
        (_at(MONDAY, 10, 30), _at(MONDAY, 11, 30)),
        (_at(MONDAY, 11), _at(MONDAY, 12)),
    ]


def test_duration_filling_whole_window(clock):
    slots = compute_time_slots([avail("MONDAY", "09:00", "12:00")], MONDAY, 180, clock)

    assert [(s.start, s.end) for s in slots] == [(_at(MONDAY, 9), _at(MONDAY, 12))]


def test_duration_longer_than_window(clock):
    assert compute_time_slots([avail("TUESDAY", "09:00", "10:00")], TUESDAY, 90, clock) == []


def test_other_weekdays_ignored(clock):
    records = [avail("TUESDAY", "09:00", "12:00"), avail("FRIDAY", "09:00", "12:00")]
    assert compute_time_slots(records, MONDAY, 60, clock) == []


def test_day_name_case_insensitive(clock):
    slots = compute_time_slots([avail(" monday ", "09:00", "10:00")], MONDAY, 60, clock)
    assert _starts(slots) == [time(9)]


def test_malformed_windows_contribute_nothing(clock):
    records = [
        avail("MONDAY", "08:00", "25:99", id=1),
        avail("MONDAY", "9:00", "10:00", id=2),
        avail("MONDAY", "09:00:00", "10:00:00", id=3),
        avail("MONDAY", None, "10:00", id=4),
        avail("MONDAY", "12:00", "12:00", id=5),
        avail("MONDAY", "14:00", "13:00", id=6),
        avail("FUNDAY", "09:00", "10:00", id=7),
        avail(None, "09:00", "10:00", id=8),
        avail("MONDAY", "15:00", "16:00", id=9),
    ]

    slots = compute_time_slots(records, MONDAY, 60, clock)

    assert _starts(slots) == [time(15)]


def test_overlapping_windows_do_not_duplicate_starts(clock):
    records = [
        avail("MONDAY", "09:00", "11:00", id=1),
        avail("MONDAY", "10:00", "12:00", id=2),
    ]

    slots = compute_time_slots(records, MONDAY, 60, clock)

    assert _starts(slots) == [time(9), time(9, 30), time(10), time(10, 30), time(11)]


def test_merged_windows_sorted_by_start(clock):
    records = [
        avail("MONDAY", "14:00", "15:00", id=1),
        avail("MONDAY", "09:15", "10:45", id=2),
        avail("MONDAY", "09:00", "10:30", id=3),
    ]

    slots = compute_time_slots(records, MONDAY, 60, clock)

    assert _starts(slots) == [
        time(9), time(9, 15), time(9, 30), time(9, 45), time(14),
    ]
    starts = [s.start for s in slots]
    assert starts == sorted(set(starts))


def test_late_in_the_day_leaves_nothing():
    clock = FixedClock(_at(TODAY, 11, 45))
    assert compute_time_slots([avail("WEDNESDAY", "09:00", "12:00")], TODAY, 60, clock) == []


def test_today_keeps_only_future_starts():
    clock = FixedClock(_at(TODAY, 10, 15))
    slots = compute_time_slots([avail("WEDNESDAY", "09:00", "12:00")], TODAY, 60, clock)
    assert _starts(slots) == [time(10, 30), time(11)]


@pytest.mark.parametrize(
    "now_time, expected",
    [
        (time(10, 59), [time(11)]),
        (time(11), []),
        (time(11, 1), []),
    ],
)
def test_today_boundary_at_last_start(now_time, expected):
    # last possible start is windowEnd - duration = 11:00
    clock = FixedClock(datetime.combine(TODAY, now_time, tzinfo=timezone.utc))
    slots = compute_time_slots([avail("WEDNESDAY", "09:00", "12:00")], TODAY, 60, clock)
    assert _starts(slots) == expected


def test_now_filter_only_applies_to_today():
    # clock late on Monday evening does not affect next Monday
    clock = FixedClock(_at(MONDAY - timedelta(days=7), 23, 0))
    slots = compute_time_slots([avail("MONDAY", "09:00", "10:00")], MONDAY, 60, clock)
    assert _starts(slots) == [time(9)]


@pytest.mark.parametrize("duration", [60, 90, 120, 150, 180])
def test_every_slot_fits_its_window_and_duration(clock, duration):
    windows = [("09:00", "17:30"), ("18:15", "21:00")]
    records = [avail("MONDAY", s, e, id=i) for i, (s, e) in enumerate(windows)]

    slots = compute_time_slots(records, MONDAY, duration, clock)

    assert slots
    for slot in slots:
        assert slot.end - slot.start == timedelta(minutes=duration)
        assert slot.duration == timedelta(minutes=duration)
        assert any(
            _at(MONDAY, *map(int, s.split(":"))) <= slot.start
            and slot.end <= _at(MONDAY, *map(int, e.split(":")))
            for s, e in windows
        )


def test_repeated_calls_give_same_result(clock):
    records = [avail("MONDAY", "09:00", "12:00"), avail("MONDAY", "10:00", "13:00", id=2)]

    first = compute_time_slots(records, MONDAY, 90, clock)
    second = compute_time_slots(records, MONDAY, 90, clock)

    assert first == second


def test_non_positive_duration_yields_nothing(clock):
    records = [avail("MONDAY", "09:00", "12:00")]
    assert compute_time_slots(records, MONDAY, 0, clock) == []
    assert compute_time_slots(records, MONDAY, -30, clock) == []


def test_custom_stride(clock):
    config = BookingConfig(slot_step_minutes=60)
    slots = compute_time_slots([avail("MONDAY", "09:00", "12:00")], MONDAY, 60, clock, config=config)
    assert _starts(slots) == [time(9), time(10), time(11)]


def test_slots_follow_clock_timezone():
    tz = ZoneInfo("America/New_York")
    clock = FixedClock(datetime(2026, 10, 14, 8, 0, tzinfo=tz))

    slots = compute_time_slots([avail("MONDAY", "09:00", "10:00")], MONDAY, 60, clock)

    assert len(slots) == 1
    assert slots[0].start.tzinfo is tz
    assert slots[0].label == "09:00"


def test_naive_clock_gives_naive_slots():
    clock = FixedClock(datetime(2026, 10, 14, 8, 0))
    slots = compute_time_slots([avail("MONDAY", "09:00", "10:00")], MONDAY, 60, clock)
    assert slots[0].start == datetime(2026, 10, 19, 9, 0)
    assert slots[0].start.tzinfo is None


def test_duration_is_wall_clock_across_dst_change():
    tz = ZoneInfo("America/New_York")
    fall_back = date(2026, 11, 1)  # Sunday, clocks go back at 02:00
    clock = FixedClock(datetime(2026, 10, 14, 8, 0, tzinfo=tz))

    slots = compute_time_slots([avail("SUNDAY", "00:00", "03:00")], fall_back, 60, clock)

    assert [s.label for s in slots] == ["00:00", "00:30", "01:00", "01:30", "02:00"]
    assert all(s.duration == timedelta(hours=1) for s in slots)


def test_spring_forward_starts_keep_wall_clock_labels():
    tz = ZoneInfo("America/New_York")
    spring_forward = date(2027, 3, 14)  # Sunday, 02:00 does not exist
    clock = FixedClock(datetime(2026, 10, 14, 8, 0, tzinfo=tz))

    slots = compute_time_slots([avail("SUNDAY", "01:00", "04:00")], spring_forward, 60, clock)
    by_label = {s.label: s for s in slots}

    assert list(by_label) == ["01:00", "01:30", "02:00", "02:30", "03:00"]
    assert by_label["02:00"].start.astimezone(timezone.utc) == by_label["03:00"].start.astimezone(timezone.utc)


def test_label_is_short_start_time(clock):
    slots = compute_time_slots([avail("MONDAY", "13:30", "15:00")], MONDAY, 60, clock)
    assert [s.label for s in slots] == ["13:30", "14:00"]
