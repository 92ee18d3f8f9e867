from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StopTimeEvent:
    # Signed seconds; positive means late.
    delay: int | None = None


@dataclass(frozen=True, slots=True)
class StopTimeUpdate:
    departure: StopTimeEvent | None = None


@dataclass(frozen=True, slots=True)
class TripDescriptor:
    trip_id: str | None = None


@dataclass(frozen=True, slots=True)
class TripUpdate:
    trip: TripDescriptor | None = None
    stop_time_updates: tuple[StopTimeUpdate, ...] = ()


@dataclass(frozen=True, slots=True)
class FeedEntity:
    id: str
    trip_update: TripUpdate | None = None


@dataclass(frozen=True, slots=True)
class FeedEnvelope:
    """One decoded GTFS-Realtime snapshot. Owned by the request that fetched it."""

    entities: tuple[FeedEntity, ...] = ()
