from __future__ import annotations

import logging

from transithub.model.errors import ErrorCode, OperationResult


logger = logging.getLogger(__name__)


class Passenger:
    """
    A rider and the vehicle ids they hold bookings on.

    The booking list is a local record only: duplicates are allowed and nothing checks it against
    the vehicles' seat counters.
    """

    def __init__(self, passenger_id: int, name: str) -> None:
        self._id = int(passenger_id)
        self._name = name
        self._booked_vehicle_ids: list[int] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def booked_vehicle_ids(self) -> tuple[int, ...]:
        return tuple(self._booked_vehicle_ids)

    def add_booking(self, vehicle_id: int) -> None:
        self._booked_vehicle_ids.append(int(vehicle_id))

    def remove_booking(self, vehicle_id: int) -> OperationResult:
        # First match only; the rest keep their order.
        try:
            self._booked_vehicle_ids.remove(int(vehicle_id))
        except ValueError:
            message = f"Passenger {self._id} has no booking on vehicle {vehicle_id}."
            logger.warning(message)
            return OperationResult.failure(ErrorCode.BOOKING_NOT_FOUND, message)
        return OperationResult.success()

    def __repr__(self) -> str:
        return f"Passenger(id={self._id}, name={self._name!r}, bookings={self._booked_vehicle_ids})"
