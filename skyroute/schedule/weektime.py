"""Conversions between day/time labels and week minutes.

Weeks start on Monday 00:00. A "week minute" counts minutes from the
start of week zero; values past 10079 belong to later weeks.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..domain.errors import ScheduleFormatError

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
DAYS_PER_WEEK = 7
MINUTES_PER_WEEK = DAYS_PER_WEEK * MINUTES_PER_DAY

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_DAY_TO_INDEX: Dict[str, int] = {}
for _index, _name in enumerate(DAY_NAMES):
    _DAY_TO_INDEX[_name.upper()] = _index
    _DAY_TO_INDEX[_name[:3].upper()] = _index


def parse_day(day_name: str) -> int:
    """Return the Monday-based index of a day name.

    Accepts full names and three-letter abbreviations in any case.
    """
    key = day_name.strip().upper()
    if key not in _DAY_TO_INDEX:
        raise ScheduleFormatError(f"Invalid day name: {day_name!r}", value=day_name)
    return _DAY_TO_INDEX[key]


def parse_time(hhmm: str) -> int:
    """Convert ``"HH:MM"`` into minutes since midnight."""
    parts = hhmm.strip().split(":")
    if len(parts) != 2:
        raise ScheduleFormatError(f"Invalid time format: {hhmm!r}", value=hhmm)
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ScheduleFormatError(
            f"Invalid time format: {hhmm!r}", value=hhmm, cause=e
        ) from e
    if not (0 <= hours < 24 and 0 <= minutes < MINUTES_PER_HOUR):
        raise ScheduleFormatError(f"Time out of range: {hhmm!r}", value=hhmm)
    return hours * MINUTES_PER_HOUR + minutes


def day_and_time_to_week_minute(day_name: str, hhmm: str) -> int:
    return parse_day(day_name) * MINUTES_PER_DAY + parse_time(hhmm)


def departure_arrival_minutes(day_name: str, hhmm: str, duration: int) -> Tuple[int, int]:
    """Return ``(departure, arrival)`` week minutes for a timetable entry.

    The arrival is not folded back into the week: an overnight Sunday
    flight arrives after minute 10080.
    """
    departure = day_and_time_to_week_minute(day_name, hhmm)
    return departure, departure + duration


def week_minute_to_day_and_time(minute: int) -> Tuple[str, str]:
    """Return ``(day_name, "HH:MM")`` for any minute, ignoring the week number."""
    within_week = minute % MINUTES_PER_WEEK
    day_index, minute_of_day = divmod(within_week, MINUTES_PER_DAY)
    return DAY_NAMES[day_index], format_hhmm(minute_of_day)


def week_index(minute: int) -> int:
    return minute // MINUTES_PER_WEEK


def format_hhmm(minutes: int) -> str:
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours:02d}:{mins:02d}"


def format_week_minute(minute: int) -> str:
    """Render a minute as ``"Monday 09:30"``, marking later weeks ``(+Nw)``."""
    day, hhmm = week_minute_to_day_and_time(minute)
    weeks = week_index(minute)
    if weeks > 0:
        return f"{day} {hhmm} (+{weeks}w)"
    return f"{day} {hhmm}"


def format_duration(minutes: int) -> str:
    """Render a duration as ``"1h30"`` (or ``"45m"`` under an hour)."""
    hours, mins = divmod(minutes, MINUTES_PER_HOUR)
    if hours == 0:
        return f"{mins}m"
    return f"{hours}h{mins:02d}"
