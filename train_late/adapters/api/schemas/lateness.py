from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class RouteSchema(BaseModel):
    id: str
    short_name: str
    long_name: str


class TripSchema(BaseModel):
    id: str


class LatenessSchema(BaseModel):
    trip_id: str
    status: Literal["late", "no_data"]
    minutes_late: int | None = None
