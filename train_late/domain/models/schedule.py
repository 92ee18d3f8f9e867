from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Route:
    """A rail route from the static schedule (subset of GTFS routes.txt)."""

    id: str
    short_name: str
    long_name: str


@dataclass(frozen=True, slots=True)
class Trip:
    route_id: str
    id: str


@dataclass(frozen=True, slots=True)
class ScheduleIndex:
    """In-memory schedule, built once at startup and read-only afterwards.

    Trips whose route_id matches no loaded route are kept; they are only
    reachable through `trips_for_route` with that exact id.
    """

    routes: tuple[Route, ...] = ()
    trips: tuple[Trip, ...] = ()

    _trips_by_route: dict[str, tuple[Trip, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        grouped: dict[str, list[Trip]] = {}
        for trip in self.trips:
            grouped.setdefault(trip.route_id, []).append(trip)
        object.__setattr__(
            self,
            "_trips_by_route",
            {route_id: tuple(trips) for route_id, trips in grouped.items()},
        )

    def routes_all(self) -> tuple[Route, ...]:
        return self.routes

    def trips_for_route(self, route_id: str) -> tuple[Trip, ...]:
        return self._trips_by_route.get(route_id, ())
