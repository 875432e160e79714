from __future__ import annotations

import logging
from dataclasses import dataclass, field

from transithub.config.models import DemoSettings
from transithub.demo.repository import CENTRAL_BUS_STATION_ID, EXPRESS_VEHICLE_ID
from transithub.model.registry import TransitRegistry
from transithub.report.formatting import (
    format_passenger,
    format_station_schedules,
    format_travel_time,
    format_vehicle,
)
from transithub.schemas.core import Direction, Schedule


logger = logging.getLogger(__name__)


@dataclass
class DemoReport:
    lines: list[str] = field(default_factory=list)
    initial_booking_ok: bool = False
    fill_successes: int = 0
    fill_failures: int = 0
    travel_times: dict[int, float] = field(default_factory=dict)
    cancel_ok: bool = False
    rejected_schedule_times: list[str] = field(default_factory=list)

    def add(self, *texts: str) -> None:
        self.lines.extend(texts)

    def text(self) -> str:
        return "\n".join(self.lines)


def run_demo(registry: TransitRegistry, settings: DemoSettings, *, passenger_id: int = 1) -> DemoReport:
    """
    Replay the demo sequence against `registry`.

    Expects the dataset built by `DemoRepository`: the express bus, the central station and at least
    one other vehicle assigned to it.
    """

    report = DemoReport()
    report.add("=== Public Transportation Station Management System (Demo) ===", "")

    for station in registry.stations():
        report.add(format_station_schedules(station), "")
    report.add(*(format_vehicle(v) for v in registry.vehicles()))
    report.add("")

    express = registry.get_vehicle(EXPRESS_VEHICLE_ID)
    passenger = registry.get_passenger(passenger_id)

    report.add(f"Attempting booking passenger {passenger.id} on vehicle {express.id} (ExpressBus)...")
    result = registry.book(passenger.id, express.id)
    report.initial_booking_ok = result.ok
    report.add("Booking successful." if result else f"Booking failed: {result.message}")
    report.add("", "Passenger & Vehicle state after booking:", format_passenger(passenger), format_vehicle(express))

    report.add("", "Filling up ExpressBus (simulate)...")
    for _ in range(settings.fill_attempts):
        if express.book_seat():
            report.fill_successes += 1
        else:
            report.fill_failures += 1
    logger.info(
        "Fill attempts on vehicle %s: succeeded=%s failed=%s",
        express.id,
        report.fill_successes,
        report.fill_failures,
    )
    report.add("After mass booking attempts:", format_vehicle(express))

    central = registry.get_station(CENTRAL_BUS_STATION_ID)
    standard = next(v for v in registry.vehicles_at_station(central.id) if not v.is_express)
    report.add("")
    for vehicle in (standard, express):
        report.travel_times[vehicle.id] = vehicle.calculate_travel_time(settings.distance_km)
        report.add(format_travel_time(vehicle, settings.distance_km))

    report.add("", f"Canceling one booking on express bus for passenger {passenger.id}...")
    result = registry.cancel(passenger.id, express.id)
    report.cancel_ok = result.ok
    report.add("Cancellation successful." if result else f"Cancellation failed: {result.message}")
    report.add(format_passenger(passenger), format_vehicle(express))

    report.add("", f"Testing station schedule limit (adding schedules to {central.name})...")
    for hour in range(11, 11 + settings.limit_probe_count):
        time = f"{hour}:00"
        if not central.add_schedule(Schedule(time, Direction.ARRIVAL, standard.id)):
            report.rejected_schedule_times.append(time)
            report.add(f"Failed to add schedule at {time}")

    report.add("", "Final schedules:", format_station_schedules(central), "", "=== Demo finished ===")
    return report
