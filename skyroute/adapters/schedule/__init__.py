"""Schedule adapters - Implementations of schedule-related ports.

Available implementations:
- CSVScheduleRepository: Loads the weekly timetable from a CSV file
- EarliestArrivalSolver: Finds earliest-arrival itineraries
"""

from .csv_repository import CSVScheduleRepository
from .earliest_arrival_solver import EarliestArrivalSolver

__all__ = ["CSVScheduleRepository", "EarliestArrivalSolver"]
