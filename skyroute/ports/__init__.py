"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .routing import ItinerarySolverPort, PathSolverPort, ScheduleRepositoryPort

__all__ = [
    "ScheduleRepositoryPort",
    "ItinerarySolverPort",
    "PathSolverPort",
    "CachePort",
]
