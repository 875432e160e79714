from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    CAPACITY_EXCEEDED = "capacity_exceeded"
    NO_BOOKING_TO_CANCEL = "no_booking_to_cancel"
    SCHEDULE_LIMIT_REACHED = "schedule_limit_reached"
    BOOKING_NOT_FOUND = "booking_not_found"
    SCHEDULE_NOT_FOUND = "schedule_not_found"
    VEHICLE_NOT_FOUND = "vehicle_not_found"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a single model operation.

    Domain failures are never raised. Callers branch on truthiness (`if vehicle.book_seat(): ...`)
    and read `error`/`message` when they need the reason.
    """

    ok: bool
    error: Optional[ErrorCode] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str = "") -> OperationResult:
        return cls(True, None, message)

    @classmethod
    def failure(cls, error: ErrorCode, message: str) -> OperationResult:
        return cls(False, error, message)
