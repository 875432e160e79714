from __future__ import annotations

import logging
import operator
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, Literal, Optional, Union

from transithub.model.bounded import BoundedCounter
from transithub.model.errors import ErrorCode, OperationResult


logger = logging.getLogger(__name__)

BASE_SPEED_KMH = 40.0
DEFAULT_STATUS = "On-time"

VehicleKindTag = Literal["standard", "express_bus"]


@dataclass(frozen=True)
class Standard:
    tag: VehicleKindTag = field(default="standard", init=False)


@dataclass(frozen=True)
class ExpressBus:
    speed_multiplier: float = 1.2
    fewer_stops: int = 3
    tag: VehicleKindTag = field(default="express_bus", init=False)

    def __post_init__(self) -> None:
        if not self.speed_multiplier > 0:
            raise ValueError(f"speed_multiplier must be > 0, got {self.speed_multiplier}")


VehicleKind = Union[Standard, ExpressBus]


def _standard_hours(kind: VehicleKind, distance_km: float, base_speed_kmh: float) -> float:
    return distance_km / base_speed_kmh


def _express_hours(kind: VehicleKind, distance_km: float, base_speed_kmh: float) -> float:
    if not isinstance(kind, ExpressBus):
        raise TypeError(f"Express travel time needs an ExpressBus kind, got {type(kind).__name__}")
    return distance_km / (base_speed_kmh * kind.speed_multiplier)


TRAVEL_TIME_STRATEGIES: dict[str, Callable[[VehicleKind, float, float], float]] = {
    "standard": _standard_hours,
    "express_bus": _express_hours,
}


class Vehicle:
    """
    A bus or train with a bounded seat counter.

    Seat booking and cancellation are serialized per vehicle. The station assignment is a plain id,
    never checked against a registry.
    """

    def __init__(
        self,
        vehicle_id: int,
        route: str,
        capacity: int,
        *,
        kind: Optional[VehicleKind] = None,
        status: str = DEFAULT_STATUS,
        base_speed_kmh: float = BASE_SPEED_KMH,
    ) -> None:
        # Rejects floats such as 2.7 instead of truncating them.
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        if not base_speed_kmh > 0:
            raise ValueError(f"base_speed_kmh must be > 0, got {base_speed_kmh}")
        self._id = int(vehicle_id)
        self._route = route
        self._seats = BoundedCounter(capacity)
        self._kind: VehicleKind = kind if kind is not None else Standard()
        self._status = status
        self._assigned_station_id: Optional[int] = None
        self._base_speed_kmh = float(base_speed_kmh)
        self._lock = RLock()

    @property
    def id(self) -> int:
        return self._id

    @property
    def route(self) -> str:
        return self._route

    @property
    def capacity(self) -> int:
        return self._seats.limit

    @property
    def booked_count(self) -> int:
        return self._seats.value

    @property
    def available_seats(self) -> int:
        return self._seats.limit - self._seats.value

    @property
    def is_full(self) -> bool:
        return self._seats.is_full

    @property
    def status(self) -> str:
        return self._status

    @property
    def assigned_station_id(self) -> Optional[int]:
        return self._assigned_station_id

    @property
    def kind(self) -> VehicleKind:
        return self._kind

    @property
    def is_express(self) -> bool:
        return self._kind.tag == "express_bus"

    def set_status(self, status: str) -> None:
        self._status = status

    def assign_to_station(self, station_id: int) -> None:
        self._assigned_station_id = int(station_id)

    def unassign_station(self) -> None:
        self._assigned_station_id = None

    def book_seat(self) -> OperationResult:
        with self._lock:
            if not self._seats.try_increment():
                message = f"Vehicle {self._id} is full (capacity {self.capacity})."
                logger.warning(message)
                return OperationResult.failure(ErrorCode.CAPACITY_EXCEEDED, message)
            return OperationResult.success()

    def cancel_seat(self) -> OperationResult:
        with self._lock:
            if not self._seats.try_decrement():
                message = f"Vehicle {self._id} has no bookings to cancel."
                logger.warning(message)
                return OperationResult.failure(ErrorCode.NO_BOOKING_TO_CANCEL, message)
            return OperationResult.success()

    def calculate_travel_time(self, distance_km: float) -> float:
        """Estimated hours to cover `distance_km`, using the formula for this vehicle's kind."""

        distance_km = float(distance_km)
        if distance_km < 0:
            raise ValueError(f"distance_km must be >= 0, got {distance_km}")
        strategy = TRAVEL_TIME_STRATEGIES[self._kind.tag]
        return strategy(self._kind, distance_km, self._base_speed_kmh)

    def __repr__(self) -> str:
        return (
            f"Vehicle(id={self._id}, route={self._route!r}, kind={self._kind.tag}, "
            f"booked={self.booked_count}/{self.capacity})"
        )
