from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    ARRIVAL = "Arrival"
    DEPARTURE = "Departure"


class StationType(str, Enum):
    BUS = "Bus"
    TRAIN = "Train"


@dataclass(frozen=True)
class Schedule:
    """
    One arrival/departure entry held by a station.

    `time` is a free-form label such as "08:00"; it is compared as a string and never parsed.
    `vehicle_id` is a weak reference resolved through the registry.
    """

    time: str
    direction: Direction
    vehicle_id: int

    def matches(self, time: str, vehicle_id: int) -> bool:
        return self.time == time and self.vehicle_id == vehicle_id
