"""Immutable domain models for the SkyRoute planner.

All models are frozen dataclasses with slots. Times are integer minutes:
recurring flights use an offset into a Monday-start reference week,
concrete flight instances use absolute minutes since week zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, List, Mapping, Optional, Tuple, Union

_MINUTES_PER_WEEK = 7 * 24 * 60

# Arrival time reported when the target cannot be reached.
UNREACHABLE = float("inf")


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed weighted edge of a WeightedGraph."""

    origin: Hashable
    destination: Hashable
    weight: float


@dataclass(frozen=True, slots=True)
class RecurringFlight:
    """A flight departing at the same offset into every 7-day cycle.

    Attributes:
        origin: Departure airport code
        destination: Arrival airport code
        departure_offset: Minutes since the start of the week (0..10079)
        duration: Flight time in minutes
    """

    origin: str
    destination: str
    departure_offset: int
    duration: int

    def __post_init__(self) -> None:
        """Validate offset and duration ranges."""
        if not 0 <= self.departure_offset < _MINUTES_PER_WEEK:
            raise ValueError(
                f"Departure offset must be between 0 and {_MINUTES_PER_WEEK - 1}, "
                f"got {self.departure_offset}"
            )
        if self.duration < 0:
            raise ValueError(f"Duration must be non-negative, got {self.duration}")

    @property
    def arrival_offset(self) -> int:
        """Arrival in week minutes; may exceed the week for overnight flights."""
        return self.departure_offset + self.duration


@dataclass(frozen=True, slots=True)
class FlightInstance:
    """One concrete occurrence of a recurring flight.

    Attributes:
        origin: Departure airport code
        destination: Arrival airport code
        departure: Absolute departure minute
        arrival: Absolute arrival minute
    """

    origin: str
    destination: str
    departure: int
    arrival: int

    @property
    def duration(self) -> int:
        return self.arrival - self.departure


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Single-source shortest path distances and predecessors.

    Attributes:
        source: The query source
        distance: Node -> distance, ``inf`` for unreachable nodes
        predecessor: Node -> previous node on the best path, ``None`` for
            the source and for unreached nodes
    """

    source: Hashable
    distance: Mapping[Hashable, float]
    predecessor: Mapping[Hashable, Optional[Hashable]]

    def distance_to(self, node: Hashable) -> float:
        return self.distance.get(node, float("inf"))

    def is_reachable(self, node: Hashable) -> bool:
        return self.distance_to(node) != float("inf")

    def path_to(self, node: Hashable) -> List[Hashable]:
        """Return the best path from the source to ``node``.

        Empty when ``node`` is unreachable.
        """
        if not self.is_reachable(node):
            return []
        path: List[Hashable] = []
        current: Optional[Hashable] = node
        while current is not None:
            path.append(current)
            current = self.predecessor.get(current)
        path.reverse()
        return path


@dataclass(frozen=True, slots=True)
class PathResult:
    """Result of a single-pair path query on a WeightedGraph.

    Attributes:
        path: Ordered tuple of nodes from source to destination
        total_weight: Sum of edge weights along the path
        algorithm: Name of the algorithm that produced the path
    """

    path: Tuple[Any, ...]
    total_weight: float
    algorithm: str = ""

    @property
    def is_empty(self) -> bool:
        """Check if no path was found."""
        return len(self.path) == 0

    @property
    def num_hops(self) -> int:
        return max(len(self.path) - 1, 0)


@dataclass(frozen=True, slots=True)
class ItineraryResult:
    """Result of an earliest-arrival query.

    Attributes:
        source: Departure airport code
        target: Arrival airport code
        start_time: Absolute minute the traveller is ready at the source
        min_layover: Minimum minutes between landing and boarding
        airports: Airports visited, source and target inclusive
        flights: Concrete flight instances used, in travel order
        arrival_time: Absolute arrival minute, or ``UNREACHABLE``
    """

    source: str
    target: str
    start_time: int
    min_layover: int
    airports: Tuple[str, ...] = field(default_factory=tuple)
    flights: Tuple[FlightInstance, ...] = field(default_factory=tuple)
    arrival_time: Union[int, float] = UNREACHABLE

    @property
    def is_reachable(self) -> bool:
        return self.arrival_time != UNREACHABLE

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.airports) == 0

    @property
    def num_legs(self) -> int:
        return len(self.flights)

    @property
    def total_minutes(self) -> Union[int, float]:
        """Minutes from the start time to the final arrival."""
        return self.arrival_time - self.start_time


@dataclass(frozen=True, slots=True)
class TimetableRow:
    """A flight rendered for display.

    Attributes:
        origin: Departure airport code
        destination: Arrival airport code
        departure: Departure label, e.g. ``"Monday 08:00"``
        arrival: Arrival label
        duration: Duration label, e.g. ``"1h30"``
    """

    origin: str
    destination: str
    departure: str
    arrival: str
    duration: str
