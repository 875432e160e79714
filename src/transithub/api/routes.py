from __future__ import annotations

# FastAPI primitives:
# - `APIRouter` groups endpoints so the app factory can include them cleanly.
# - `Depends` injects the service per request (no module-level globals).
# - `HTTPException` turns lookup failures and rejected operations into status codes.
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from transithub.api.schemas import (
    AppConfigOut,
    OperationOut,
    PassengerOut,
    ScheduleIn,
    StationOut,
    StationSchedulesOut,
    TravelTimeOut,
    VehicleOut,
)
from transithub.api.service import TransitService
from transithub.model.errors import ErrorCode, OperationResult


router = APIRouter()


def get_service(request: Request) -> TransitService:
    return request.app.state.transit_service  # type: ignore[attr-defined]


def _operation_out(result: OperationResult) -> OperationOut:
    # Domain failures are not exceptions in the model; here they become 409 Conflict, except an
    # unresolved vehicle id which is 404 like any other unknown id.
    if not result:
        code = result.error.value if result.error is not None else "unknown"
        status_code = 404 if result.error == ErrorCode.VEHICLE_NOT_FOUND else 409
        raise HTTPException(status_code=status_code, detail={"error": code, "message": result.message})
    return OperationOut(ok=True, message=result.message)


def _not_found(kind: str, key: object) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{kind} not found: {key}")


@router.get("/config", response_model=AppConfigOut)
def get_config(service: TransitService = Depends(get_service)) -> AppConfigOut:
    cfg = service.config
    return AppConfigOut(
        app_name=cfg.app.name,
        demo_mode=cfg.app.demo_mode,
        limits={
            "max_schedules_per_station": cfg.limits.max_schedules_per_station,
            "base_speed_kmh": cfg.limits.base_speed_kmh,
        },
    )


@router.get("/stations", response_model=list[StationOut])
def list_stations(service: TransitService = Depends(get_service)) -> list[StationOut]:
    return [StationOut(**s) for s in service.list_stations()]


@router.get("/stations/{station_id}/schedules", response_model=StationSchedulesOut)
def station_schedules(station_id: int, service: TransitService = Depends(get_service)) -> StationSchedulesOut:
    try:
        items = service.station_schedules(station_id)
    except KeyError:
        raise _not_found("Station", station_id)
    return StationSchedulesOut(station_id=station_id, items=items)


@router.post("/stations/{station_id}/schedules", response_model=OperationOut)
def add_schedule(
    station_id: int,
    body: ScheduleIn,
    service: TransitService = Depends(get_service),
) -> OperationOut:
    try:
        result = service.add_schedule(
            station_id,
            time=body.time,
            direction=body.direction,
            vehicle_id=body.vehicle_id,
        )
    except KeyError:
        raise _not_found("Station", station_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _operation_out(result)


@router.delete("/stations/{station_id}/schedules", response_model=OperationOut)
def remove_schedule(
    station_id: int,
    time: str = Query(...),
    vehicle_id: int = Query(...),
    service: TransitService = Depends(get_service),
) -> OperationOut:
    try:
        result = service.remove_schedule(station_id, time=time, vehicle_id=vehicle_id)
    except KeyError:
        raise _not_found("Station", station_id)
    return _operation_out(result)


@router.get("/vehicles", response_model=list[VehicleOut])
def list_vehicles(service: TransitService = Depends(get_service)) -> list[VehicleOut]:
    return [VehicleOut(**v) for v in service.list_vehicles()]


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut)
def get_vehicle(vehicle_id: int, service: TransitService = Depends(get_service)) -> VehicleOut:
    try:
        return VehicleOut(**service.vehicle(vehicle_id))
    except KeyError:
        raise _not_found("Vehicle", vehicle_id)


@router.get("/vehicles/{vehicle_id}/travel_time", response_model=TravelTimeOut)
def travel_time(
    vehicle_id: int,
    distance_km: float = Query(..., ge=0),
    service: TransitService = Depends(get_service),
) -> TravelTimeOut:
    try:
        return TravelTimeOut(**service.travel_time(vehicle_id, distance_km))
    except KeyError:
        raise _not_found("Vehicle", vehicle_id)


@router.get("/passengers/{passenger_id}", response_model=PassengerOut)
def get_passenger(passenger_id: int, service: TransitService = Depends(get_service)) -> PassengerOut:
    try:
        return PassengerOut(**service.passenger(passenger_id))
    except KeyError:
        raise _not_found("Passenger", passenger_id)


@router.post("/passengers/{passenger_id}/bookings/{vehicle_id}", response_model=OperationOut)
def book(passenger_id: int, vehicle_id: int, service: TransitService = Depends(get_service)) -> OperationOut:
    try:
        result = service.book(passenger_id, vehicle_id)
    except KeyError:
        raise _not_found("Passenger", passenger_id)
    return _operation_out(result)


@router.delete("/passengers/{passenger_id}/bookings/{vehicle_id}", response_model=OperationOut)
def cancel(passenger_id: int, vehicle_id: int, service: TransitService = Depends(get_service)) -> OperationOut:
    try:
        result = service.cancel(passenger_id, vehicle_id)
    except KeyError:
        raise _not_found("Passenger", passenger_id)
    return _operation_out(result)
