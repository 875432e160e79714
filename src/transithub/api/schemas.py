from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LimitsConfigOut(BaseModel):
    max_schedules_per_station: int
    base_speed_kmh: float


class AppConfigOut(BaseModel):
    app_name: str
    demo_mode: bool
    limits: LimitsConfigOut


class ScheduleOut(BaseModel):
    time: str
    direction: str = Field(examples=["Arrival", "Departure"])
    vehicle_id: int


class ScheduleIn(BaseModel):
    time: str = Field(examples=["08:00"])
    direction: str = Field(examples=["Arrival", "Departure"])
    vehicle_id: int


class StationOut(BaseModel):
    id: int
    name: str
    location: str
    type: str = Field(examples=["Bus", "Train"])
    schedule_count: int
    max_schedules: int


class StationSchedulesOut(BaseModel):
    station_id: int
    items: list[ScheduleOut] = Field(default_factory=list)


class VehicleOut(BaseModel):
    id: int
    route: str
    kind: str = Field(examples=["standard", "express_bus"])
    capacity: int
    booked_count: int
    available_seats: int
    status: str
    assigned_station_id: Optional[int] = None
    speed_multiplier: Optional[float] = None
    fewer_stops: Optional[int] = None


class TravelTimeOut(BaseModel):
    vehicle_id: int
    distance_km: float
    hours: float


class PassengerOut(BaseModel):
    id: int
    name: str
    booked_vehicle_ids: list[int] = Field(default_factory=list)


class OperationOut(BaseModel):
    ok: bool
    message: str = ""
