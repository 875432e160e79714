from __future__ import annotations

# `Any` marks the dict payload boundary between the model and the HTTP layer.
from typing import Any, Optional

from transithub.config.models import AppConfig
from transithub.demo.repository import DemoRepository
from transithub.model.errors import OperationResult
from transithub.model.registry import TransitRegistry
from transithub.model.vehicle import ExpressBus, Vehicle
from transithub.schemas.core import Direction, Schedule


# `TransitService` is a thin application layer between HTTP routes and the registry.
# Route handlers stay focused on status codes and request parsing; the service owns id resolution
# and shapes entities into plain dicts for the Pydantic response models.
class TransitService:
    def __init__(self, config: AppConfig, registry: Optional[TransitRegistry] = None) -> None:
        self._config = config
        # Built once up front: handlers run in a thread pool and all of them must share one registry.
        if registry is None:
            registry = DemoRepository(config).build_registry() if config.app.demo_mode else TransitRegistry()
        self._registry = registry

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def registry(self) -> TransitRegistry:
        return self._registry

    def list_stations(self) -> list[dict[str, Any]]:
        return [
            {
                "id": s.id,
                "name": s.name,
                "location": s.location,
                "type": s.type.value,
                "schedule_count": s.schedule_count,
                "max_schedules": s.max_schedules,
            }
            for s in self.registry.stations()
        ]

    def station_schedules(self, station_id: int) -> list[dict[str, Any]]:
        station = self.registry.get_station(station_id)
        return [
            {"time": s.time, "direction": s.direction.value, "vehicle_id": s.vehicle_id}
            for s in station.schedules
        ]

    def add_schedule(self, station_id: int, *, time: str, direction: str, vehicle_id: int) -> OperationResult:
        station = self.registry.get_station(station_id)
        # `Direction(...)` raises ValueError for unknown labels; the route maps that to 422.
        return station.add_schedule(Schedule(time, Direction(direction), int(vehicle_id)))

    def remove_schedule(self, station_id: int, *, time: str, vehicle_id: int) -> OperationResult:
        return self.registry.get_station(station_id).remove_schedule_at_time(time, vehicle_id)

    def list_vehicles(self) -> list[dict[str, Any]]:
        return [_vehicle_payload(v) for v in self.registry.vehicles()]

    def vehicle(self, vehicle_id: int) -> dict[str, Any]:
        return _vehicle_payload(self.registry.get_vehicle(vehicle_id))

    def travel_time(self, vehicle_id: int, distance_km: float) -> dict[str, Any]:
        vehicle = self.registry.get_vehicle(vehicle_id)
        return {
            "vehicle_id": vehicle.id,
            "distance_km": float(distance_km),
            "hours": vehicle.calculate_travel_time(distance_km),
        }

    def passenger(self, passenger_id: int) -> dict[str, Any]:
        p = self.registry.get_passenger(passenger_id)
        return {"id": p.id, "name": p.name, "booked_vehicle_ids": list(p.booked_vehicle_ids)}

    def book(self, passenger_id: int, vehicle_id: int) -> OperationResult:
        return self.registry.book(passenger_id, vehicle_id)

    def cancel(self, passenger_id: int, vehicle_id: int) -> OperationResult:
        return self.registry.cancel(passenger_id, vehicle_id)


def _vehicle_payload(vehicle: Vehicle) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": vehicle.id,
        "route": vehicle.route,
        "kind": vehicle.kind.tag,
        "capacity": vehicle.capacity,
        "booked_count": vehicle.booked_count,
        "available_seats": vehicle.available_seats,
        "status": vehicle.status,
        "assigned_station_id": vehicle.assigned_station_id,
    }
    # Express-only attributes stay absent (null) for standard vehicles.
    if isinstance(vehicle.kind, ExpressBus):
        payload["speed_multiplier"] = vehicle.kind.speed_multiplier
        payload["fewer_stops"] = vehicle.kind.fewer_stops
    return payload
