"""Tests for day/time to week-minute conversions."""

import pytest

from skyroute.domain.errors import ScheduleFormatError
from skyroute.schedule.weektime import (
    MINUTES_PER_WEEK,
    day_and_time_to_week_minute,
    departure_arrival_minutes,
    format_duration,
    format_week_minute,
    parse_day,
    parse_time,
    week_index,
    week_minute_to_day_and_time,
)


@pytest.mark.parametrize(
    "name, index",
    [
        ("Monday", 0),
        ("monday", 0),
        ("  TUE ", 1),
        ("Wed", 2),
        ("thursday", 3),
        ("FRI", 4),
        ("Saturday", 5),
        ("sun", 6),
    ],
)
def test_parse_day_accepts_full_and_short_names(name, index):
    assert parse_day(name) == index


@pytest.mark.parametrize("name", ["", "Mo", "Funday", "Tues"])
def test_parse_day_rejects_unknown_names(name):
    with pytest.raises(ScheduleFormatError) as exc_info:
        parse_day(name)
    assert exc_info.value.value == name


@pytest.mark.parametrize(
    "text, minutes",
    [("00:00", 0), ("08:00", 480), ("9:05", 545), (" 23:59 ", 1439)],
)
def test_parse_time(text, minutes):
    assert parse_time(text) == minutes


@pytest.mark.parametrize("text", ["0800", "8", "ab:cd", "24:00", "12:60", "1:2:3"])
def test_parse_time_rejects_bad_input(text):
    with pytest.raises(ScheduleFormatError):
        parse_time(text)


def test_day_and_time_to_week_minute():
    assert day_and_time_to_week_minute("Monday", "08:00") == 480
    assert day_and_time_to_week_minute("Tue", "00:30") == 1440 + 30
    assert day_and_time_to_week_minute("Sunday", "23:59") == MINUTES_PER_WEEK - 1


def test_departure_arrival_keeps_overnight_arrival_unfolded():
    departure, arrival = departure_arrival_minutes("Sunday", "23:00", 120)

    assert departure == 6 * 1440 + 23 * 60
    assert arrival == departure + 120
    assert arrival > MINUTES_PER_WEEK


def test_week_minute_to_day_and_time():
    assert week_minute_to_day_and_time(570) == ("Monday", "09:30")
    assert week_minute_to_day_and_time(MINUTES_PER_WEEK + 570) == ("Monday", "09:30")
    assert week_minute_to_day_and_time(-30) == ("Sunday", "23:30")


def test_round_trip_every_day():
    for day in ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"):
        minute = day_and_time_to_week_minute(day, "13:45")
        name, hhmm = week_minute_to_day_and_time(minute)
        assert name.startswith(day)
        assert hhmm == "13:45"


def test_week_index_and_labels():
    assert week_index(0) == 0
    assert week_index(MINUTES_PER_WEEK) == 1
    assert format_week_minute(570) == "Monday 09:30"
    assert format_week_minute(2 * MINUTES_PER_WEEK + 570) == "Monday 09:30 (+2w)"


def test_format_duration():
    assert format_duration(45) == "45m"
    assert format_duration(90) == "1h30"
    assert format_duration(600) == "10h00"
