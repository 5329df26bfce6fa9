"""Weekly flight schedules and earliest-arrival routing."""

from .schedule_graph import HORIZON_WEEKS, ScheduleGraph
from .weektime import (
    MINUTES_PER_DAY,
    MINUTES_PER_WEEK,
    day_and_time_to_week_minute,
    departure_arrival_minutes,
    format_duration,
    format_week_minute,
    week_minute_to_day_and_time,
)

__all__ = [
    "ScheduleGraph",
    "HORIZON_WEEKS",
    "MINUTES_PER_DAY",
    "MINUTES_PER_WEEK",
    "day_and_time_to_week_minute",
    "departure_arrival_minutes",
    "week_minute_to_day_and_time",
    "format_week_minute",
    "format_duration",
]
