"""Tests for the weekly schedule and the earliest-arrival search."""

import math

import pytest

from skyroute.domain.models import UNREACHABLE, FlightInstance, RecurringFlight
from skyroute.schedule import MINUTES_PER_WEEK, ScheduleGraph

WEEK = MINUTES_PER_WEEK


def _hm(text):
    hours, minutes = text.split(":")
    return int(hours) * 60 + int(minutes)


@pytest.fixture
def java_sea():
    """Monday flights around Jakarta, Kuala Lumpur and Singapore."""
    schedule = ScheduleGraph()
    schedule.add_flight("SUB", "CGK", _hm("08:00"), _hm("09:30"))
    schedule.add_flight("SUB", "CGK", _hm("09:00"), _hm("10:30"))
    schedule.add_flight("CGK", "SIN", _hm("08:15"), _hm("10:15"))
    schedule.add_flight("CGK", "SIN", _hm("10:00"), _hm("12:30"))
    schedule.add_flight("CGK", "KUL", _hm("09:45"), _hm("11:15"))
    schedule.add_flight("KUL", "SIN", _hm("11:30"), _hm("13:00"))
    return schedule


class TestScheduleGraphStorage:
    def test_add_flight_folds_departure_into_week(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", WEEK + 480, WEEK + 570)

        assert schedule.flights_from("A") == [RecurringFlight("A", "B", 480, 90)]

    def test_add_flight_from_csv_overnight(self):
        schedule = ScheduleGraph()
        schedule.add_flight_from_csv("A", "B", "Sunday", "23:00", 120)

        (flight,) = schedule.flights_from("A")
        assert flight.departure_offset == 10020
        assert flight.duration == 120
        assert flight.arrival_offset == WEEK + 60

    def test_airports_include_destinations(self, java_sea):
        assert java_sea.airports() == {"SUB", "CGK", "SIN", "KUL"}
        assert "SIN" in java_sea
        assert java_sea.flights_from("SIN") == []

    def test_all_flights(self, java_sea):
        assert java_sea.flight_count == 6
        assert len(java_sea.all_flights()) == 6
        assert len(list(java_sea)) == 6

    def test_flights_from_returns_copy(self, java_sea):
        java_sea.flights_from("SUB").clear()
        assert len(java_sea.flights_from("SUB")) == 2

    def test_arrival_before_departure_is_rejected(self):
        schedule = ScheduleGraph()
        with pytest.raises(ValueError):
            schedule.add_flight("A", "B", 600, 500)

    def test_recurring_flight_validates_offset(self):
        with pytest.raises(ValueError):
            RecurringFlight("A", "B", WEEK, 10)
        with pytest.raises(ValueError):
            RecurringFlight("A", "B", -1, 10)


class TestEarliestArrival:
    def test_single_flight_same_cycle(self):
        schedule = ScheduleGraph()
        schedule.add_flight("SUB", "CGK", 480, 570)

        result = schedule.earliest_arrival("SUB", "CGK", 480, 0)

        assert result.arrival_time == 570
        assert result.airports == ("SUB", "CGK")
        assert result.flights == (FlightInstance("SUB", "CGK", 480, 570),)
        assert result.is_reachable
        assert result.num_legs == 1
        assert result.total_minutes == 90

    def test_connection_without_layover(self, java_sea):
        result = java_sea.earliest_arrival("SUB", "SIN", _hm("08:00"), 0)

        assert result.airports == ("SUB", "CGK", "SIN")
        assert result.arrival_time == _hm("12:30")
        assert result.flights == (
            FlightInstance("SUB", "CGK", _hm("08:00"), _hm("09:30")),
            FlightInstance("CGK", "SIN", _hm("10:00"), _hm("12:30")),
        )

    def test_layover_forces_next_week_connection(self, java_sea):
        result = java_sea.earliest_arrival("SUB", "SIN", _hm("08:00"), 30)

        # the 08:00 departure is too early once the layover applies at SUB,
        # and every CGK departure is gone by 11:00 so SIN is next Monday
        assert result.flights[0] == FlightInstance("SUB", "CGK", _hm("09:00"), _hm("10:30"))
        assert result.flights[1] == FlightInstance(
            "CGK", "SIN", WEEK + _hm("08:15"), WEEK + _hm("10:15")
        )
        assert result.arrival_time == WEEK + _hm("10:15")

    def test_next_week_rollover_is_exactly_one_week_later(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", 60, 90)

        result = schedule.earliest_arrival("A", "B", 120, 0)

        (flight,) = result.flights
        naive_same_week = 60
        assert flight.departure == naive_same_week + WEEK
        assert flight.arrival == naive_same_week + WEEK + 30
        assert result.arrival_time == WEEK + 90

    def test_departure_equal_to_earliest_allowed_is_caught(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "X", 500, 570)
        schedule.add_flight("X", "Y", 600, 660)

        # landing at X at 570 leaves exactly 30 minutes before the 600 departure
        caught = schedule.earliest_arrival("A", "Y", 400, 30)
        missed = schedule.earliest_arrival("A", "Y", 400, 31)

        assert caught.arrival_time == 660
        assert missed.flights[0].departure == 500
        assert missed.arrival_time == WEEK + 660

    def test_start_in_a_later_week(self):
        schedule = ScheduleGraph()
        schedule.add_flight("SUB", "CGK", 480, 570)

        start = 3 * WEEK + 100
        result = schedule.earliest_arrival("SUB", "CGK", start, 0)

        assert result.flights == (FlightInstance("SUB", "CGK", 3 * WEEK + 480, 3 * WEEK + 570),)

    def test_flight_crossing_week_boundary(self):
        schedule = ScheduleGraph()
        schedule.add_flight_from_csv("A", "B", "Sunday", "23:00", 120)
        schedule.add_flight_from_csv("B", "C", "Monday", "02:00", 60)

        result = schedule.earliest_arrival("A", "C", 10000, 0)

        assert result.airports == ("A", "B", "C")
        assert result.flights[0].arrival == WEEK + 60
        assert result.arrival_time == WEEK + 180

    def test_unreachable_target(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", 0, 60)
        schedule.add_flight("C", "A", 0, 60)

        result = schedule.earliest_arrival("A", "C", 0, 0)

        assert not result.is_reachable
        assert result.arrival_time == UNREACHABLE
        assert math.isinf(result.arrival_time)
        assert result.airports == ()
        assert result.flights == ()
        assert result.is_empty

    def test_unknown_airports_are_unreachable(self, java_sea):
        assert not java_sea.earliest_arrival("XXX", "SIN", 0, 0).is_reachable
        assert not java_sea.earliest_arrival("SUB", "XXX", 0, 0).is_reachable

    def test_source_equals_target(self, java_sea):
        result = java_sea.earliest_arrival("CGK", "CGK", 1234, 60)

        assert result.airports == ("CGK",)
        assert result.flights == ()
        assert result.arrival_time == 1234

    def test_horizon_prunes_late_arrivals(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", 0, 10070)
        schedule.add_flight("B", "C", 0, 10070)
        schedule.add_flight("C", "D", 0, 100)

        # C is reached at 20150; the next C->D leaves at 20160 (the cutoff)
        # but lands after it
        assert schedule.earliest_arrival("A", "C", 0, 0).arrival_time == 20150
        assert not schedule.earliest_arrival("A", "D", 0, 0).is_reachable

        wider = schedule.earliest_arrival("A", "D", 0, 0, horizon=3 * WEEK)
        assert wider.arrival_time == 20260

    def test_arrival_exactly_at_horizon_is_accepted(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", 0, 2 * WEEK)
        schedule.add_flight("A", "C", 0, 2 * WEEK + 1)

        assert schedule.earliest_arrival("A", "B", 0, 0).arrival_time == 2 * WEEK
        assert not schedule.earliest_arrival("A", "C", 0, 0).is_reachable

    def test_picks_faster_later_flight(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", 0, 600)
        schedule.add_flight("A", "B", 60, 120)

        result = schedule.earliest_arrival("A", "B", 0, 0)

        assert result.flights == (FlightInstance("A", "B", 60, 120),)

    def test_improved_node_is_relaxed_again(self):
        schedule = ScheduleGraph()
        schedule.add_flight("A", "B", 0, 1000)
        schedule.add_flight("A", "C", 0, 100)
        schedule.add_flight("C", "B", 150, 200)
        schedule.add_flight("B", "D", 300, 400)

        result = schedule.earliest_arrival("A", "D", 0, 0)

        assert result.airports == ("A", "C", "B", "D")
        assert result.arrival_time == 400

    def test_repeated_queries_return_identical_results(self, java_sea):
        first = java_sea.earliest_arrival("SUB", "SIN", 480, 15)
        second = java_sea.earliest_arrival("SUB", "SIN", 480, 15)

        assert first == second
        assert java_sea.flight_count == 6

    def test_negative_inputs_are_rejected(self, java_sea):
        with pytest.raises(ValueError):
            java_sea.earliest_arrival("SUB", "SIN", -1, 0)
        with pytest.raises(ValueError):
            java_sea.earliest_arrival("SUB", "SIN", 0, -5)
