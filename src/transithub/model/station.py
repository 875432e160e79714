from __future__ import annotations

import logging
from threading import RLock

from transithub.model.bounded import BoundedList
from transithub.model.errors import ErrorCode, OperationResult
from transithub.schemas.core import Schedule, StationType


logger = logging.getLogger(__name__)

MAX_SCHEDULES = 10


class Station:
    """A bus or train station owning a bounded, insertion-ordered list of schedules."""

    def __init__(
        self,
        station_id: int,
        name: str,
        location: str,
        station_type: StationType,
        *,
        max_schedules: int = MAX_SCHEDULES,
    ) -> None:
        self._id = int(station_id)
        self._name = name
        self._location = location
        self._type = StationType(station_type)
        self._schedules: BoundedList[Schedule] = BoundedList(max_schedules)
        self._lock = RLock()

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def type(self) -> StationType:
        return self._type

    @property
    def max_schedules(self) -> int:
        return self._schedules.limit

    @property
    def schedule_count(self) -> int:
        return len(self._schedules)

    @property
    def schedules(self) -> tuple[Schedule, ...]:
        return self._schedules.snapshot()

    def add_schedule(self, schedule: Schedule) -> OperationResult:
        with self._lock:
            if not self._schedules.try_append(schedule):
                message = (
                    f"Station {self._name} has reached max schedules ({self.max_schedules}). "
                    "Cannot add more."
                )
                logger.warning(message)
                return OperationResult.failure(ErrorCode.SCHEDULE_LIMIT_REACHED, message)
            return OperationResult.success()

    def remove_schedule_at_time(self, time: str, vehicle_id: int) -> OperationResult:
        """
        Remove every schedule whose time and vehicle id both match.

        Unlike seat cancellation this is not single-unit: duplicates are all dropped in one call.
        """

        with self._lock:
            removed = self._schedules.remove_where(lambda s: s.matches(time, vehicle_id))
        if not removed:
            message = f"Station {self._name} has no schedule at {time} for vehicle {vehicle_id}."
            logger.warning(message)
            return OperationResult.failure(ErrorCode.SCHEDULE_NOT_FOUND, message)
        logger.debug("Removed %s schedule(s) at %s for vehicle %s from station %s", removed, time, vehicle_id, self._id)
        return OperationResult.success(f"Removed {removed} schedule(s).")

    def __repr__(self) -> str:
        return f"Station(id={self._id}, name={self._name!r}, type={self._type.value}, schedules={len(self._schedules)})"
