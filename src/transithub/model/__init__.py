__all__ = [
    "BoundedCounter",
    "BoundedList",
    "ErrorCode",
    "ExpressBus",
    "OperationResult",
    "Passenger",
    "Standard",
    "Station",
    "TransitRegistry",
    "Vehicle",
]

from transithub.model.bounded import BoundedCounter, BoundedList
from transithub.model.errors import ErrorCode, OperationResult
from transithub.model.passenger import Passenger
from transithub.model.registry import TransitRegistry
from transithub.model.station import Station
from transithub.model.vehicle import ExpressBus, Standard, Vehicle
