from __future__ import annotations

import math
import random
from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

import pytest

from transithub.model.errors import ErrorCode
from transithub.model.vehicle import TRAVEL_TIME_STRATEGIES, ExpressBus, Standard, Vehicle


def test_booking_up_to_capacity_then_rejects() -> None:
    vehicle = Vehicle(1, "Route A", 5)
    assert all(vehicle.book_seat() for _ in range(5))

    result = vehicle.book_seat()
    assert not result
    assert result.error == ErrorCode.CAPACITY_EXCEEDED
    assert vehicle.booked_count == 5
    assert vehicle.is_full


def test_cancel_on_empty_vehicle_fails() -> None:
    vehicle = Vehicle(1, "Route A", 5)
    result = vehicle.cancel_seat()
    assert not result
    assert result.error == ErrorCode.NO_BOOKING_TO_CANCEL
    assert vehicle.booked_count == 0


def test_book_then_cancel_has_no_net_effect() -> None:
    vehicle = Vehicle(1, "Route A", 5)
    vehicle.book_seat()
    vehicle.book_seat()
    assert vehicle.book_seat()
    assert vehicle.cancel_seat()
    assert vehicle.booked_count == 2


def test_booked_count_never_leaves_bounds() -> None:
    vehicle = Vehicle(1, "Route A", 3)
    rng = random.Random(7)
    for _ in range(200):
        if rng.random() < 0.5:
            vehicle.book_seat()
        else:
            vehicle.cancel_seat()
        assert 0 <= vehicle.booked_count <= vehicle.capacity


def test_zero_capacity_vehicle_never_books() -> None:
    vehicle = Vehicle(1, "Shuttle", 0)
    assert not vehicle.book_seat()
    assert vehicle.booked_count == 0


def test_travel_time_by_kind() -> None:
    standard = Vehicle(101, "Route A", 40)
    express = Vehicle(102, "Express A", 30, kind=ExpressBus(speed_multiplier=1.2, fewer_stops=2))
    assert math.isclose(standard.calculate_travel_time(120.0), 3.0)
    assert math.isclose(express.calculate_travel_time(120.0), 2.5)
    assert standard.calculate_travel_time(0) == 0


def test_travel_time_dispatches_on_runtime_kind() -> None:
    vehicles = [Vehicle(1, "A", 10), Vehicle(2, "B", 10, kind=ExpressBus(speed_multiplier=2.0))]
    assert [v.calculate_travel_time(80) for v in vehicles] == [2.0, 1.0]
    assert set(TRAVEL_TIME_STRATEGIES) == {Standard().tag, ExpressBus().tag}


def test_travel_time_uses_configured_base_speed() -> None:
    vehicle = Vehicle(1, "A", 10, base_speed_kmh=60.0)
    assert math.isclose(vehicle.calculate_travel_time(120), 2.0)


def test_negative_distance_is_rejected() -> None:
    with pytest.raises(ValueError):
        Vehicle(1, "A", 10).calculate_travel_time(-1)


def test_invalid_construction_is_rejected() -> None:
    with pytest.raises(ValueError):
        Vehicle(1, "A", -1)
    with pytest.raises(ValueError):
        ExpressBus(speed_multiplier=0)


def test_fractional_capacity_is_rejected() -> None:
    with pytest.raises(TypeError):
        Vehicle(1, "A", 2.7)  # type: ignore[arg-type]


def test_express_strategy_rejects_standard_kind() -> None:
    with pytest.raises(TypeError):
        TRAVEL_TIME_STRATEGIES["express_bus"](Standard(), 120.0, 40.0)


def test_concurrent_bookings_never_oversell() -> None:
    vehicle = Vehicle(1, "Route A", 25)
    workers, attempts = 8, 10
    barrier = Barrier(workers)

    def _book_many() -> int:
        barrier.wait()
        return sum(1 for _ in range(attempts) if vehicle.book_seat())

    with ThreadPoolExecutor(max_workers=workers) as pool:
        successes = sum(pool.map(lambda _: _book_many(), range(workers)))

    assert successes == 25
    assert vehicle.booked_count == 25


def test_station_assignment_and_status() -> None:
    vehicle = Vehicle(1, "A", 10)
    assert vehicle.assigned_station_id is None
    assert vehicle.status == "On-time"

    vehicle.assign_to_station(99)
    assert vehicle.assigned_station_id == 99
    vehicle.unassign_station()
    assert vehicle.assigned_station_id is None

    vehicle.set_status("Delayed")
    assert vehicle.status == "Delayed"


def test_express_bus_defaults() -> None:
    kind = ExpressBus()
    assert kind.speed_multiplier == 1.2
    assert kind.fewer_stops == 3
    assert Vehicle(1, "X", 10, kind=kind).is_express
