"""Route planner service - Main orchestrator.

Front-ends (CLI, GUI) talk to this service only. It loads the timetable
through the repository port, turns weekday/time input into week
minutes, runs earliest-arrival queries through the solver port, and
renders results for display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..domain.errors import (
    NoRouteFoundError,
    RoutingError,
    ScheduleFormatError,
    UnknownNodeError,
)
from ..domain.models import FlightInstance, ItineraryResult, RecurringFlight, TimetableRow
from ..ports.cache import CachePort
from ..ports.routing import ItinerarySolverPort, ScheduleRepositoryPort
from ..schedule.weektime import (
    day_and_time_to_week_minute,
    format_duration,
    format_week_minute,
)


@dataclass
class RoutePlannerService:
    """Main service for planning flight itineraries.

    Attributes:
        schedule_repository: Loads the weekly timetable
        itinerary_solver: Computes earliest-arrival itineraries
        cache: Optional memo of itinerary results, keyed by query
        default_min_layover: Layover used when a query gives none
    """

    schedule_repository: ScheduleRepositoryPort
    itinerary_solver: ItinerarySolverPort
    cache: Optional[CachePort[ItineraryResult]] = None
    default_min_layover: int = 60

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_airports(self) -> List[str]:
        return list(self.schedule_repository.list_airports())

    def plan(
        self,
        source: str,
        target: str,
        start_time: int,
        min_layover: Optional[int] = None,
    ) -> ItineraryResult:
        """Plan the earliest-arrival itinerary from an absolute start minute.

        Raises:
            UnknownNodeError: If an airport is not in the timetable.
            NoRouteFoundError: If the target cannot be reached in time.
            ScheduleDataError: If the timetable cannot be loaded.
        """
        layover = self.default_min_layover if min_layover is None else min_layover
        source = source.strip().upper()
        target = target.strip().upper()

        self._logger.info(
            "Planning itinerary",
            extra={
                "source": source,
                "target": target,
                "start_time": start_time,
                "min_layover": layover,
            },
        )

        schedule = self.schedule_repository.load()

        def compute() -> ItineraryResult:
            return self.itinerary_solver.solve(schedule, source, target, start_time, layover)

        if self.cache is None:
            return compute()
        return self.cache.get_or_compute((source, target, start_time, layover), compute)

    def plan_from_weekday(
        self,
        source: str,
        target: str,
        day: str,
        time: str = "00:00",
        min_layover: Optional[int] = None,
    ) -> ItineraryResult:
        """Plan an itinerary starting on ``day`` at ``time`` in week zero.

        Raises:
            ScheduleFormatError: If the day or time cannot be parsed.
            plus everything plan() raises.
        """
        start_time = day_and_time_to_week_minute(day, time)
        return self.plan(source, target, start_time, min_layover)

    def plan_safe(
        self,
        source: str,
        target: str,
        day: str,
        time: str = "00:00",
        min_layover: Optional[int] = None,
    ) -> Tuple[Optional[ItineraryResult], Optional[str]]:
        """Plan an itinerary, returning an error message instead of raising.

        Returns:
            Tuple of (ItineraryResult or None, error message or None).
        """
        try:
            return self.plan_from_weekday(source, target, day, time, min_layover), None
        except ScheduleFormatError as e:
            return None, f"Invalid input: {e.message}"
        except ValueError as e:
            return None, f"Invalid input: {e}"
        except UnknownNodeError as e:
            return None, f"Unknown airport: {e.node}"
        except NoRouteFoundError as e:
            return None, f"No route found between {e.departure} and {e.arrival}"
        except RoutingError as e:
            self._logger.error("Planning failed", extra={"error": str(e)})
            return None, f"Error: {e}"

    def reload(self) -> None:
        """Re-read the timetable and drop memoised itineraries."""
        self.schedule_repository.clear_cache()
        if self.cache is not None:
            self.cache.clear()
        self.schedule_repository.load()

    def timetable(self) -> List[TimetableRow]:
        """All flights as display rows, sorted by origin, destination and time."""
        flights = sorted(
            self.schedule_repository.load().all_flights(),
            key=lambda f: (f.origin, f.destination, f.departure_offset),
        )
        return [self._recurring_row(f) for f in flights]

    def itinerary_rows(self, itinerary: ItineraryResult) -> List[TimetableRow]:
        return [self._instance_row(f) for f in itinerary.flights]

    def render_itinerary(self, itinerary: ItineraryResult) -> str:
        """Render an itinerary as human-readable text."""
        if not itinerary.is_reachable:
            return f"No route found from {itinerary.source} to {itinerary.target}"

        lines = [
            f"Route: {' -> '.join(itinerary.airports)}",
            f"Depart after: {format_week_minute(itinerary.start_time)}"
            f" (min layover {format_duration(itinerary.min_layover)})",
        ]
        for row in self.itinerary_rows(itinerary):
            lines.append(
                f"  {row.origin} -> {row.destination}  "
                f"{row.departure} -> {row.arrival}  ({row.duration})"
            )
        lines.append(f"Arrival: {format_week_minute(int(itinerary.arrival_time))}")
        lines.append(f"Total travel time: {format_duration(int(itinerary.total_minutes))}")
        return "\n".join(lines)

    @staticmethod
    def _recurring_row(flight: RecurringFlight) -> TimetableRow:
        return TimetableRow(
            origin=flight.origin,
            destination=flight.destination,
            departure=format_week_minute(flight.departure_offset),
            arrival=format_week_minute(flight.arrival_offset),
            duration=format_duration(flight.duration),
        )

    @staticmethod
    def _instance_row(flight: FlightInstance) -> TimetableRow:
        return TimetableRow(
            origin=flight.origin,
            destination=flight.destination,
            departure=format_week_minute(flight.departure),
            arrival=format_week_minute(flight.arrival),
            duration=format_duration(flight.duration),
        )
