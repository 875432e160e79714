from __future__ import annotations

from transithub.model.passenger import Passenger
from transithub.model.station import Station
from transithub.model.vehicle import ExpressBus, Vehicle
from transithub.report.formatting import (
    SCHEDULE_COLUMNS,
    format_passenger,
    format_station_schedules,
    format_vehicle,
    schedules_frame,
)
from transithub.schemas.core import StationType


def test_schedules_frame_has_one_row_per_schedule_in_order(demo_registry) -> None:
    frame = schedules_frame(demo_registry.get_station(1))
    assert list(frame.columns) == SCHEDULE_COLUMNS
    assert frame["Time"].tolist() == ["08:00", "08:30", "09:00"]
    assert frame["Type"].tolist() == ["Departure", "Arrival", "Departure"]
    assert frame["VehicleID"].tolist() == [101, 102, 102]


def test_empty_station_reports_no_schedules() -> None:
    text = format_station_schedules(Station(9, "Empty", "Nowhere", StationType.BUS))
    assert text.splitlines()[-1].strip() == "No schedules."


def test_station_table_lists_rows(demo_registry) -> None:
    lines = format_station_schedules(demo_registry.get_station(1)).splitlines()
    assert lines[0] == "Schedules for Station [1] Central Bus Station (Bus, Downtown):"
    assert lines[1].split() == ["Time", "Type", "VehicleID"]
    assert [ln.split()[0] for ln in lines[2:]] == ["08:00", "08:30", "09:00"]


def test_express_fields_only_for_express_bus() -> None:
    standard = format_vehicle(Vehicle(101, "Route A", 40))
    express = format_vehicle(Vehicle(102, "Express A", 30, kind=ExpressBus(1.2, 2)))
    assert "SpeedMult" not in standard
    assert "AssignedStation: None" in standard
    assert "SpeedMult: 1.2, FewerStops: 2" in express


def test_format_passenger() -> None:
    passenger = Passenger(1, "Anh")
    assert format_passenger(passenger).endswith("Booked Vehicles: None")
    passenger.add_booking(102)
    passenger.add_booking(101)
    assert format_passenger(passenger).endswith("Booked Vehicles: 102, 101")
