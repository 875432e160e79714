from __future__ import annotations

import logging
from typing import Optional

from transithub.model.errors import ErrorCode, OperationResult
from transithub.model.passenger import Passenger
from transithub.model.station import Station
from transithub.model.vehicle import Vehicle


logger = logging.getLogger(__name__)


class TransitRegistry:
    """
    Id -> entity lookups owned by whoever drives the model (demo script, API service, tests).

    Vehicles point at stations and passengers point at vehicles by id only; this is where those ids
    get resolved.
    """

    def __init__(self) -> None:
        self._stations: dict[int, Station] = {}
        self._vehicles: dict[int, Vehicle] = {}
        self._passengers: dict[int, Passenger] = {}

    def add_station(self, station: Station) -> Station:
        if station.id in self._stations:
            raise ValueError(f"Duplicate station id: {station.id}")
        self._stations[station.id] = station
        return station

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        if vehicle.id in self._vehicles:
            raise ValueError(f"Duplicate vehicle id: {vehicle.id}")
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    def add_passenger(self, passenger: Passenger) -> Passenger:
        if passenger.id in self._passengers:
            raise ValueError(f"Duplicate passenger id: {passenger.id}")
        self._passengers[passenger.id] = passenger
        return passenger

    def get_station(self, station_id: int) -> Station:
        station = self._stations.get(int(station_id))
        if station is None:
            raise KeyError(station_id)
        return station

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        vehicle = self._vehicles.get(int(vehicle_id))
        if vehicle is None:
            raise KeyError(vehicle_id)
        return vehicle

    def get_passenger(self, passenger_id: int) -> Passenger:
        passenger = self._passengers.get(int(passenger_id))
        if passenger is None:
            raise KeyError(passenger_id)
        return passenger

    def find_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._vehicles.get(int(vehicle_id))

    def stations(self) -> list[Station]:
        return list(self._stations.values())

    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles.values())

    def passengers(self) -> list[Passenger]:
        return list(self._passengers.values())

    def vehicles_at_station(self, station_id: int) -> list[Vehicle]:
        return [v for v in self._vehicles.values() if v.assigned_station_id == int(station_id)]

    def book(self, passenger_id: int, vehicle_id: int) -> OperationResult:
        """Reserve a seat, then record it on the passenger. Nothing is recorded if the vehicle is full."""

        passenger = self.get_passenger(passenger_id)
        vehicle = self.find_vehicle(vehicle_id)
        if vehicle is None:
            message = f"Vehicle {vehicle_id} not found."
            logger.warning(message)
            return OperationResult.failure(ErrorCode.VEHICLE_NOT_FOUND, message)

        result = vehicle.book_seat()
        if not result:
            return result
        passenger.add_booking(vehicle.id)
        logger.info("Booked passenger %s on vehicle %s (%s/%s)", passenger.id, vehicle.id, vehicle.booked_count, vehicle.capacity)
        return result

    def cancel(self, passenger_id: int, vehicle_id: int) -> OperationResult:
        """Drop the passenger's booking record, then release the seat."""

        passenger = self.get_passenger(passenger_id)
        vehicle = self.find_vehicle(vehicle_id)
        if vehicle is None:
            message = f"Vehicle {vehicle_id} not found."
            logger.warning(message)
            return OperationResult.failure(ErrorCode.VEHICLE_NOT_FOUND, message)

        result = passenger.remove_booking(vehicle.id)
        if not result:
            return result
        result = vehicle.cancel_seat()
        if result:
            logger.info("Cancelled booking of passenger %s on vehicle %s", passenger.id, vehicle.id)
        return result
