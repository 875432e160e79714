from __future__ import annotations

import math

from transithub.config.models import DemoSettings
from transithub.demo.repository import EXPRESS_VEHICLE_ID
from transithub.demo.scenario import run_demo


def test_demo_dataset_matches_fixture(demo_registry) -> None:
    assert [s.name for s in demo_registry.stations()] == ["Central Bus Station", "North Train Station"]
    assert [v.id for v in demo_registry.vehicles()] == [101, 102, 201]
    assert [p.name for p in demo_registry.passengers()] == ["Anh", "Binh"]
    assert demo_registry.get_station(1).schedule_count == 3
    assert demo_registry.get_station(2).schedule_count == 1


def test_express_bus_fill_scenario(demo_registry) -> None:
    express = demo_registry.get_vehicle(EXPRESS_VEHICLE_ID)
    assert express.capacity == 30
    assert express.book_seat()
    assert express.booked_count == 1

    outcomes = [bool(express.book_seat()) for _ in range(31)]
    assert outcomes.count(True) == 29
    assert outcomes.count(False) == 2
    assert express.booked_count == 30


def test_run_demo_replays_sequence(demo_registry) -> None:
    report = run_demo(demo_registry, DemoSettings())

    assert report.initial_booking_ok
    assert report.fill_successes == 29
    assert report.fill_failures == 2
    assert math.isclose(report.travel_times[101], 3.0)
    assert math.isclose(report.travel_times[102], 2.5)
    assert report.cancel_ok
    assert demo_registry.get_vehicle(EXPRESS_VEHICLE_ID).booked_count == 29
    assert demo_registry.get_passenger(1).booked_vehicle_ids == ()

    # Station 1 starts with 3 schedules, so 7 of the 12 probes fit.
    assert report.rejected_schedule_times == ["18:00", "19:00", "20:00", "21:00", "22:00"]
    assert demo_registry.get_station(1).schedule_count == 10

    text = report.text()
    assert text.startswith("=== Public Transportation Station Management System (Demo) ===")
    assert "Travel time for express 102 over 120.00 km: 2.50 hours" in text
    assert text.endswith("=== Demo finished ===")
