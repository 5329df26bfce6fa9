"""Weekly recurring flight schedule and earliest-arrival search.

Flights are stored per origin airport as RecurringFlight records: a
departure offset into the reference week plus a duration. Every flight
repeats every 7 days. The earliest-arrival search runs Dijkstra on
arrival times over the time-expanded graph these recurrences define.
That graph is never built. The next usable occurrence of each flight
is computed on the fly with modular arithmetic.
"""

import heapq
from typing import Dict, Iterator, List, Optional, Set, Tuple

from ..domain.models import FlightInstance, ItineraryResult, RecurringFlight
from .weektime import MINUTES_PER_WEEK, departure_arrival_minutes

HORIZON_WEEKS = 2


class ScheduleGraph:
    """Recurring flights grouped by origin airport.

    The schedule is loaded once and must not change while a query runs.
    Queries never modify it.
    """

    def __init__(self) -> None:
        self._flights_from: Dict[str, List[RecurringFlight]] = {}
        self._airports: Dict[str, None] = {}

    def add_flight(self, origin: str, destination: str, depart: int, arrive: int) -> None:
        """Add a flight given week minutes for its departure and arrival.

        The departure is folded into the reference week; the duration
        ``arrive - depart`` is kept as is, so ``arrive`` may lie past the
        end of the week for flights that cross into the next one.
        """
        self.add_recurring_flight(
            RecurringFlight(
                origin=origin,
                destination=destination,
                departure_offset=depart % MINUTES_PER_WEEK,
                duration=arrive - depart,
            )
        )

    def add_flight_from_csv(
        self,
        origin: str,
        destination: str,
        day_of_flight: str,
        departure_time: str,
        duration_minutes: int,
    ) -> None:
        """Add a flight from timetable columns, e.g. ``"Mon"``, ``"10:30"``, ``250``."""
        depart, arrive = departure_arrival_minutes(
            day_of_flight, departure_time, duration_minutes
        )
        self.add_flight(origin, destination, depart, arrive)

    def add_recurring_flight(self, flight: RecurringFlight) -> None:
        self._airports.setdefault(flight.origin)
        self._airports.setdefault(flight.destination)
        self._flights_from.setdefault(flight.origin, []).append(flight)

    def flights_from(self, origin: str) -> List[RecurringFlight]:
        return list(self._flights_from.get(origin, []))

    def all_flights(self) -> List[RecurringFlight]:
        return [f for flights in self._flights_from.values() for f in flights]

    def airports(self) -> Set[str]:
        return set(self._airports)

    @property
    def flight_count(self) -> int:
        return sum(len(flights) for flights in self._flights_from.values())

    def __contains__(self, airport: object) -> bool:
        return airport in self._airports

    def __iter__(self) -> Iterator[RecurringFlight]:
        return iter(self.all_flights())

    def earliest_arrival(
        self,
        source: str,
        target: str,
        start_time: int,
        min_layover: int = 0,
        horizon: int = HORIZON_WEEKS * MINUTES_PER_WEEK,
    ) -> ItineraryResult:
        """Find the earliest possible arrival at ``target``.

        Parameters
        ----------
        source:
            Airport the traveller starts from.
        target:
            Airport to reach.
        start_time:
            Absolute minute (since week zero) the traveller is ready at
            ``source``.
        min_layover:
            Minutes that must elapse between arriving at an airport and
            boarding the next flight there. Also applied before the
            first flight.
        horizon:
            Search window after ``start_time``; flight occurrences
            departing or arriving after ``start_time + horizon`` are
            ignored. Defaults to two weeks.

        Returns
        -------
        ItineraryResult
            The airports visited, the concrete flights taken and the
            arrival minute. When ``target`` cannot be reached inside the
            window the airports and flights are empty and the arrival
            is ``UNREACHABLE``.
        """
        if start_time < 0:
            raise ValueError(f"Start time must be non-negative, got {start_time}")
        if min_layover < 0:
            raise ValueError(f"Minimum layover must be non-negative, got {min_layover}")

        max_time = start_time + horizon
        unreached = ItineraryResult(
            source=source,
            target=target,
            start_time=start_time,
            min_layover=min_layover,
        )

        best_time: Dict[str, float] = {airport: float("inf") for airport in self._airports}
        previous: Dict[str, str] = {}
        used_flight: Dict[str, FlightInstance] = {}
        best_time[source] = start_time

        heap: List[Tuple[int, str]] = [(start_time, source)]

        while heap:
            time, u = heapq.heappop(heap)

            if time > best_time.get(u, float("inf")):
                continue
            if u == target:
                break
            if time > max_time:
                continue

            earliest_allowed = time + min_layover
            allowed_in_week = earliest_allowed % MINUTES_PER_WEEK
            week_start = earliest_allowed - allowed_in_week

            for flight in self._flights_from.get(u, []):
                departure = week_start + flight.departure_offset
                if flight.departure_offset < allowed_in_week:
                    departure += MINUTES_PER_WEEK
                if departure > max_time:
                    continue

                arrival = departure + flight.duration
                if arrival > max_time:
                    continue

                v = flight.destination
                if arrival < best_time.get(v, float("inf")):
                    best_time[v] = arrival
                    previous[v] = u
                    used_flight[v] = FlightInstance(u, v, departure, arrival)
                    heapq.heappush(heap, (arrival, v))

        arrival_time = best_time.get(target, float("inf"))
        if arrival_time == float("inf"):
            return unreached

        airports: List[str] = []
        flights: List[FlightInstance] = []
        current: Optional[str] = target
        while current is not None:
            airports.append(current)
            flight_in = used_flight.get(current)
            if flight_in is not None:
                flights.append(flight_in)
            current = previous.get(current)

        airports.reverse()
        flights.reverse()

        return ItineraryResult(
            source=source,
            target=target,
            start_time=start_time,
            min_layover=min_layover,
            airports=tuple(airports),
            flights=tuple(flights),
            arrival_time=int(arrival_time),
        )

    def __repr__(self) -> str:
        return f"ScheduleGraph(airports={len(self._airports)}, flights={self.flight_count})"
