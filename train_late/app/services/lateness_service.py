from __future__ import annotations

from dataclasses import dataclass

from train_late.app.ports.output import IDelaySource
from train_late.domain.models import DelayResult, Route, ScheduleIndex, Trip


@dataclass(slots=True)
class LatenessService:
    """Lookup use cases exposed to the presentation layer.

    Route and trip browsing only reads the schedule index, so it keeps
    working without a realtime credential. Realtime errors from the delay
    source propagate to the request boundary.
    """

    schedule: ScheduleIndex
    delay_source: IDelaySource

    def get_routes(self) -> tuple[Route, ...]:
        return self.schedule.routes_all()

    def get_trips(self, *, route_id: str) -> tuple[Trip, ...]:
        return self.schedule.trips_for_route(route_id)

    def get_lateness(self, *, trip_id: str) -> DelayResult:
        return self.delay_source.lateness(trip_id)
