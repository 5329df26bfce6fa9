"""Earliest-arrival itinerary solver adapter.

This adapter wraps ScheduleGraph.earliest_arrival and adds:
- Endpoint validation against the loaded schedule
- Strict (raising) and safe (empty result) entry points
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError, UnknownNodeError
from ...domain.models import ItineraryResult
from ...schedule.schedule_graph import HORIZON_WEEKS, ScheduleGraph
from ...schedule.weektime import MINUTES_PER_WEEK


@dataclass
class EarliestArrivalSolver:
    """Itinerary solver using the weekly earliest-arrival search.

    This adapter implements ItinerarySolverPort.

    Attributes:
        horizon_weeks: Number of weeks after the start time to search
    """

    horizon_weeks: int = HORIZON_WEEKS
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        schedule: ScheduleGraph,
        source: str,
        target: str,
        start_time: int,
        min_layover: int,
    ) -> ItineraryResult:
        """Find the earliest arrival at ``target``.

        Raises:
            UnknownNodeError: If source or target is not in the schedule.
            NoRouteFoundError: If the target is unreachable within the horizon.
        """
        self._logger.debug(
            "Solving itinerary",
            extra={
                "source": source,
                "target": target,
                "start_time": start_time,
                "min_layover": min_layover,
            },
        )

        for code, role in ((source, "Departure"), (target, "Arrival")):
            if code not in schedule:
                raise UnknownNodeError(f"{role} airport not in schedule: {code}", node=code)

        result = self._search(schedule, source, target, start_time, min_layover)

        if not result.is_reachable:
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target},
            )
            raise NoRouteFoundError(
                f"No route from {source} to {target} within {self.horizon_weeks} weeks",
                departure=source,
                arrival=target,
            )

        self._logger.info(
            "Itinerary found",
            extra={
                "source": source,
                "target": target,
                "legs": result.num_legs,
                "arrival_time": result.arrival_time,
            },
        )
        return result

    def solve_safe(
        self,
        schedule: ScheduleGraph,
        source: str,
        target: str,
        start_time: int,
        min_layover: int,
    ) -> ItineraryResult:
        """Like solve(), but returns the unreachable result instead of raising."""
        return self._search(schedule, source, target, start_time, min_layover)

    def _search(
        self,
        schedule: ScheduleGraph,
        source: str,
        target: str,
        start_time: int,
        min_layover: int,
    ) -> ItineraryResult:
        return schedule.earliest_arrival(
            source,
            target,
            start_time,
            min_layover,
            horizon=self.horizon_weeks * MINUTES_PER_WEEK,
        )
