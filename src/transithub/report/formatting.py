from __future__ import annotations

import pandas as pd

from transithub.model.passenger import Passenger
from transithub.model.station import Station
from transithub.model.vehicle import ExpressBus, Vehicle


SCHEDULE_COLUMNS = ["Time", "Type", "VehicleID"]


def schedules_frame(station: Station) -> pd.DataFrame:
    """One row per schedule, in the station's current order."""

    rows = [
        {"Time": s.time, "Type": s.direction.value, "VehicleID": s.vehicle_id}
        for s in station.schedules
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def format_station_schedules(station: Station) -> str:
    header = f"Schedules for Station [{station.id}] {station.name} ({station.type.value}, {station.location}):"
    frame = schedules_frame(station)
    if frame.empty:
        return f"{header}\n  No schedules."
    table = frame.to_string(index=False, justify="left")
    return f"{header}\n{table}"


def format_vehicle(vehicle: Vehicle) -> str:
    kind = vehicle.kind
    if isinstance(kind, ExpressBus):
        return (
            f"ExpressBus ID: {vehicle.id}, Route: {vehicle.route}, Capacity: {vehicle.capacity}, "
            f"Booked: {vehicle.booked_count}, SpeedMult: {kind.speed_multiplier:g}, "
            f"FewerStops: {kind.fewer_stops}, Status: {vehicle.status}"
        )
    station = "None" if vehicle.assigned_station_id is None else str(vehicle.assigned_station_id)
    return (
        f"Vehicle ID: {vehicle.id}, Route: {vehicle.route}, Capacity: {vehicle.capacity}, "
        f"Booked: {vehicle.booked_count}, Status: {vehicle.status}, AssignedStation: {station}"
    )


def format_passenger(passenger: Passenger) -> str:
    booked = ", ".join(str(v) for v in passenger.booked_vehicle_ids) or "None"
    return f"Passenger ID: {passenger.id}, Name: {passenger.name}, Booked Vehicles: {booked}"


def format_travel_time(vehicle: Vehicle, distance_km: float) -> str:
    label = "express" if vehicle.is_express else "vehicle"
    hours = vehicle.calculate_travel_time(distance_km)
    return f"Travel time for {label} {vehicle.id} over {distance_km:.2f} km: {hours:.2f} hours"
