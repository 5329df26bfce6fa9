"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    CycleError,
    NegativeCycleError,
    NoRouteFoundError,
    RoutingError,
    ScheduleDataError,
    ScheduleFormatError,
    UnknownNodeError,
)
from .models import (
    UNREACHABLE,
    Edge,
    FlightInstance,
    ItineraryResult,
    PathResult,
    RecurringFlight,
    ShortestPathResult,
    TimetableRow,
)

__all__ = [
    # Models
    "UNREACHABLE",
    "Edge",
    "RecurringFlight",
    "FlightInstance",
    "ShortestPathResult",
    "PathResult",
    "ItineraryResult",
    "TimetableRow",
    # Errors
    "RoutingError",
    "UnknownNodeError",
    "CycleError",
    "NegativeCycleError",
    "NoRouteFoundError",
    "ScheduleFormatError",
    "ScheduleDataError",
    "ConfigurationError",
]
