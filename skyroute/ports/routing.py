"""Routing ports - Abstractions for schedule loading and route solving.

These protocols define the contracts the planner service depends on:
loading the weekly timetable, answering earliest-arrival queries, and
finding paths through a generic weighted graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import ItineraryResult, PathResult
    from ..graph.weighted_graph import WeightedGraph
    from ..schedule.schedule_graph import ScheduleGraph


class ScheduleRepositoryPort(Protocol):
    """Port for loading timetable data.

    Implementation: adapters/schedule/csv_repository.py

    The repository is responsible for loading and caching the weekly
    flight schedule from persistent storage.
    """

    def load(self) -> ScheduleGraph:
        """Load the flight schedule.

        Returns:
            The populated ScheduleGraph.
        """
        ...

    def list_airports(self) -> Sequence[str]:
        """List all airport codes in the schedule, sorted.

        Returns:
            Sequence of airport codes.
        """
        ...

    def clear_cache(self) -> None:
        """Forget the loaded schedule so the next load re-reads it."""
        ...


class ItinerarySolverPort(Protocol):
    """Port for earliest-arrival computation.

    Wraps: schedule/schedule_graph.py (ScheduleGraph.earliest_arrival)
    """

    def solve(
        self,
        schedule: ScheduleGraph,
        source: str,
        target: str,
        start_time: int,
        min_layover: int,
    ) -> ItineraryResult:
        """Find the earliest arrival at ``target``.

        Args:
            schedule: The weekly flight schedule.
            source: Departure airport code.
            target: Arrival airport code.
            start_time: Absolute minute the traveller is ready.
            min_layover: Minimum connection time in minutes.

        Returns:
            ItineraryResult with airports, flights and arrival time.
        """
        ...


class PathSolverPort(Protocol):
    """Port for single-pair shortest paths on a WeightedGraph.

    Implementations: adapters/graph/path_solvers.py
    """

    def solve(
        self,
        graph: WeightedGraph,
        source: Hashable,
        destination: Hashable,
    ) -> PathResult:
        """Find the shortest path between two nodes.

        Args:
            graph: The weighted graph.
            source: Start node.
            destination: End node.

        Returns:
            PathResult with the path and its total weight.
        """
        ...
