"""Typed domain errors for the SkyRoute planner.

Failures that mean an algorithm cannot run (unknown endpoint, cyclic
input, negative cycle) are raised. A missing path is not an error for
the algorithms: they report it with an "unreachable" value instead.

All errors inherit from RoutingError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass
class RoutingError(Exception):
    """Base error for the routing domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownNodeError(RoutingError):
    """An operation referenced a node absent from the graph.

    Attributes:
        node: The node (or airport code) that was not found
    """

    node: Any = None


@dataclass
class CycleError(RoutingError):
    """The graph contains a directed cycle, so it has no topological order.

    Attributes:
        remaining: Nodes that could not be ordered (each lies on or
            behind a cycle)
    """

    remaining: Tuple[Any, ...] = ()


@dataclass
class NegativeCycleError(RoutingError):
    """A negative-weight cycle is reachable from the source.

    Attributes:
        source: The source node of the failed query
    """

    source: Any = None


@dataclass
class NoRouteFoundError(RoutingError):
    """No route exists between the requested airports.

    Only raised by the strict solver and service APIs; the engine
    itself reports the unreachable sentinel.

    Attributes:
        departure: Departure airport code
        arrival: Arrival airport code
    """

    departure: str = ""
    arrival: str = ""


@dataclass
class ScheduleFormatError(RoutingError):
    """A day name or time-of-day string could not be parsed.

    Attributes:
        value: The offending text
    """

    value: str = ""


@dataclass
class ScheduleDataError(RoutingError):
    """Timetable loading failed.

    Attributes:
        file_path: Path to the timetable file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(RoutingError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Dotted name of the problematic setting
    """

    setting_name: str = ""
