from __future__ import annotations

import logging

from transithub.config.models import AppConfig
from transithub.model.passenger import Passenger
from transithub.model.registry import TransitRegistry
from transithub.model.station import Station
from transithub.model.vehicle import ExpressBus, Vehicle
from transithub.schemas.core import Direction, Schedule, StationType


logger = logging.getLogger(__name__)

CENTRAL_BUS_STATION_ID = 1
NORTH_TRAIN_STATION_ID = 2
EXPRESS_VEHICLE_ID = 102


class DemoRepository:
    """
    Deterministic in-memory dataset: two stations, three vehicles and two passengers.
    """

    def __init__(self, config: AppConfig) -> None:
        self._config = config

    def build_registry(self) -> TransitRegistry:
        limits = self._config.limits
        registry = TransitRegistry()

        central = registry.add_station(
            Station(
                CENTRAL_BUS_STATION_ID,
                "Central Bus Station",
                "Downtown",
                StationType.BUS,
                max_schedules=limits.max_schedules_per_station,
            )
        )
        north = registry.add_station(
            Station(
                NORTH_TRAIN_STATION_ID,
                "North Train Station",
                "Uptown",
                StationType.TRAIN,
                max_schedules=limits.max_schedules_per_station,
            )
        )

        route_a = registry.add_vehicle(Vehicle(101, "Route A", 40, base_speed_kmh=limits.base_speed_kmh))
        express = registry.add_vehicle(
            Vehicle(
                EXPRESS_VEHICLE_ID,
                "Express A",
                30,
                kind=ExpressBus(speed_multiplier=1.2, fewer_stops=2),
                base_speed_kmh=limits.base_speed_kmh,
            )
        )
        train = registry.add_vehicle(Vehicle(201, "Train X", 200, base_speed_kmh=limits.base_speed_kmh))

        registry.add_passenger(Passenger(1, "Anh"))
        registry.add_passenger(Passenger(2, "Binh"))

        route_a.assign_to_station(central.id)
        express.assign_to_station(central.id)
        train.assign_to_station(north.id)

        for schedule in (
            Schedule("08:00", Direction.DEPARTURE, route_a.id),
            Schedule("08:30", Direction.ARRIVAL, express.id),
            Schedule("09:00", Direction.DEPARTURE, express.id),
        ):
            central.add_schedule(schedule)
        north.add_schedule(Schedule("10:00", Direction.ARRIVAL, train.id))

        logger.debug(
            "Demo registry built: stations=%s vehicles=%s passengers=%s",
            len(registry.stations()),
            len(registry.vehicles()),
            len(registry.passengers()),
        )
        return registry
