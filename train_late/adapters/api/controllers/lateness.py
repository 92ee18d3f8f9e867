from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from train_late.adapters.api.dependencies import get_lateness_service
from train_late.adapters.api.schemas.lateness import (
    LatenessSchema,
    RouteSchema,
    TripSchema,
)
from train_late.app.services.lateness_service import LatenessService
from train_late.domain.models import MinutesLate

router = APIRouter(tags=["lateness"])


@router.get("/routes", response_model=list[RouteSchema])
def list_routes(
    service: LatenessService = Depends(get_lateness_service),
) -> list[RouteSchema]:
    return [
        RouteSchema(id=r.id, short_name=r.short_name, long_name=r.long_name)
        for r in service.get_routes()
    ]


@router.get("/trips", response_model=list[TripSchema])
def list_trips(
    route: str = Query(default=""),
    service: LatenessService = Depends(get_lateness_service),
) -> list[TripSchema]:
    return [TripSchema(id=t.id) for t in service.get_trips(route_id=route)]


@router.get("/lateness", response_model=LatenessSchema)
def get_lateness(
    trip: str = Query(default=""),
    service: LatenessService = Depends(get_lateness_service),
) -> LatenessSchema:
    if not trip:
        raise HTTPException(status_code=400, detail="trip is required")

    result = service.get_lateness(trip_id=trip)
    if isinstance(result, MinutesLate):
        return LatenessSchema(trip_id=trip, status="late", minutes_late=result.minutes)
    return LatenessSchema(trip_id=trip, status="no_data")
