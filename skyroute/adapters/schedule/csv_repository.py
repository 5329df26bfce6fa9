"""CSV Schedule Repository adapter.

Loads the weekly timetable from a CSV file with a header row. Each row
is one recurring flight: origin, destination, duration in minutes,
departure time of day and day of the week. Other columns are ignored.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from ...config import ScheduleConfig, get_config
from ...domain.errors import ScheduleDataError, ScheduleFormatError
from ...schedule.schedule_graph import ScheduleGraph


@dataclass
class CSVScheduleRepository:
    """Schedule repository that loads from a CSV file.

    This adapter implements ScheduleRepositoryPort. Malformed rows are
    skipped with a warning; an unreadable file raises ScheduleDataError.

    Attributes:
        config: Schedule configuration (path, column names)
    """

    config: ScheduleConfig = field(default_factory=lambda: get_config().schedule)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _schedule: Optional[ScheduleGraph] = field(default=None, repr=False)
    _skipped_rows: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> ScheduleGraph:
        """Load the flight schedule from the CSV file.

        Returns:
            The populated ScheduleGraph.

        Raises:
            ScheduleDataError: If the file cannot be read or lacks columns.
        """
        if self._schedule is not None:
            return self._schedule

        path = self.config.flights_path
        self._logger.debug("Loading schedule", extra={"flights_path": str(path)})

        try:
            schedule = self._load_schedule_from_csv()
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise ScheduleDataError(
                f"Failed to load schedule: {e}",
                file_path=str(path),
                cause=e,
            )

        self._schedule = schedule
        self._logger.info(
            "Schedule loaded",
            extra={
                "airports": len(schedule.airports()),
                "flights": schedule.flight_count,
                "skipped_rows": self._skipped_rows,
            },
        )
        return schedule

    def _load_schedule_from_csv(self) -> ScheduleGraph:
        """Internal method to read every row into a fresh ScheduleGraph."""
        schedule = ScheduleGraph()
        self._skipped_rows = 0

        with self.config.flights_path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            self._check_header(reader.fieldnames)
            # line 1 is the header
            for line_number, row in enumerate(reader, start=2):
                if not self._add_row(schedule, row, line_number):
                    self._skipped_rows += 1

        return schedule

    def _check_header(self, fieldnames: Optional[List[str]]) -> None:
        required = [
            self.config.origin_column,
            self.config.destination_column,
            self.config.duration_column,
            self.config.departure_time_column,
            self.config.day_column,
        ]
        present = {name.strip() for name in fieldnames or []}
        missing = [name for name in required if name not in present]
        if missing:
            raise ScheduleDataError(
                f"Missing columns in timetable: {', '.join(missing)}",
                file_path=str(self.config.flights_path),
            )

    def _add_row(
        self, schedule: ScheduleGraph, row: Mapping[str, Optional[str]], line_number: int
    ) -> bool:
        """Add one CSV row to ``schedule``; return False if it was skipped."""
        # surplus cells land under the None key as a list
        values = {
            key.strip(): (value or "").strip()
            for key, value in row.items()
            if key is not None
        }
        origin = values.get(self.config.origin_column, "").upper()
        destination = values.get(self.config.destination_column, "").upper()
        duration_str = values.get(self.config.duration_column, "")
        departure_time = values.get(self.config.departure_time_column, "")
        day = values.get(self.config.day_column, "")

        if not (origin and destination and duration_str and departure_time and day):
            self._logger.warning("Skipping incomplete row", extra={"line": line_number})
            return False

        try:
            duration = int(duration_str)
        except ValueError:
            self._logger.warning(
                "Skipping row with invalid duration",
                extra={"line": line_number, "duration": duration_str},
            )
            return False

        if duration <= 0:
            self._logger.warning(
                "Skipping row with non-positive duration",
                extra={"line": line_number, "duration": duration},
            )
            return False

        try:
            schedule.add_flight_from_csv(origin, destination, day, departure_time, duration)
        except ScheduleFormatError as e:
            self._logger.warning(
                "Skipping row with invalid day or time",
                extra={"line": line_number, "error": str(e)},
            )
            return False

        return True

    def list_airports(self) -> List[str]:
        """List all airport codes, sorted."""
        return sorted(self.load().airports())

    @property
    def skipped_rows(self) -> int:
        """Number of rows skipped by the last load."""
        return self._skipped_rows

    def clear_cache(self) -> None:
        """Clear the cached schedule."""
        self._schedule = None
        self._logger.debug("Schedule cache cleared")
