from __future__ import annotations

import pytest

from transithub.model.errors import ErrorCode
from transithub.model.passenger import Passenger
from transithub.model.registry import TransitRegistry
from transithub.model.vehicle import Vehicle


def _registry() -> TransitRegistry:
    registry = TransitRegistry()
    registry.add_vehicle(Vehicle(1, "A", 1))
    registry.add_passenger(Passenger(10, "Anh"))
    return registry


def test_duplicate_ids_are_rejected() -> None:
    registry = _registry()
    with pytest.raises(ValueError):
        registry.add_vehicle(Vehicle(1, "B", 5))
    with pytest.raises(ValueError):
        registry.add_passenger(Passenger(10, "Binh"))


def test_unknown_ids_raise_key_error() -> None:
    registry = _registry()
    with pytest.raises(KeyError):
        registry.get_station(1)
    with pytest.raises(KeyError):
        registry.get_vehicle(2)
    assert registry.find_vehicle(2) is None


def test_book_records_on_both_sides() -> None:
    registry = _registry()
    assert registry.book(10, 1)
    assert registry.get_vehicle(1).booked_count == 1
    assert registry.get_passenger(10).booked_vehicle_ids == (1,)


def test_book_on_full_vehicle_records_nothing() -> None:
    registry = _registry()
    registry.book(10, 1)

    result = registry.book(10, 1)
    assert result.error == ErrorCode.CAPACITY_EXCEEDED
    assert registry.get_passenger(10).booked_vehicle_ids == (1,)


def test_book_unknown_vehicle() -> None:
    result = _registry().book(10, 42)
    assert not result
    assert result.error == ErrorCode.VEHICLE_NOT_FOUND


def test_cancel_without_passenger_booking_keeps_seat() -> None:
    registry = _registry()
    registry.get_vehicle(1).book_seat()

    result = registry.cancel(10, 1)
    assert result.error == ErrorCode.BOOKING_NOT_FOUND
    assert registry.get_vehicle(1).booked_count == 1


def test_cancel_round_trip() -> None:
    registry = _registry()
    registry.book(10, 1)
    assert registry.cancel(10, 1)
    assert registry.get_vehicle(1).booked_count == 0
    assert registry.get_passenger(10).booked_vehicle_ids == ()


def test_vehicles_at_station_follows_assignment(demo_registry) -> None:
    assert [v.id for v in demo_registry.vehicles_at_station(1)] == [101, 102]
    assert [v.id for v in demo_registry.vehicles_at_station(2)] == [201]
    demo_registry.get_vehicle(201).unassign_station()
    assert demo_registry.vehicles_at_station(2) == []
