from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from train_late.adapters.realtime.gtfs_realtime_decoder import decode_feed
from train_late.app.ports.output import IDelaySource, IRealtimeFeedProvider
from train_late.domain.algorithms.delay_resolver import resolve_delay
from train_late.domain.models import (
    DelayResult,
    FeedEntity,
    FeedEnvelope,
    StopTimeEvent,
    StopTimeUpdate,
    TripDescriptor,
    TripUpdate,
)


@dataclass(slots=True)
class LiveDelaySource(IDelaySource):
    """Fetches, decodes and scans the live feed on every lookup."""

    feed_provider: IRealtimeFeedProvider

    def lateness(self, trip_id: str) -> DelayResult:
        envelope = decode_feed(self.feed_provider.fetch_feed())
        return resolve_delay(envelope, trip_id)


@dataclass(slots=True)
class StubDelaySource(IDelaySource):
    """Resolves lookups against a fixed envelope (offline demos, tests)."""

    envelope: FeedEnvelope = field(default_factory=FeedEnvelope)

    @staticmethod
    def from_delays(delays: Mapping[str, int]) -> "StubDelaySource":
        entities = tuple(
            FeedEntity(
                id=f"stub-{trip_id}",
                trip_update=TripUpdate(
                    trip=TripDescriptor(trip_id=trip_id),
                    stop_time_updates=(
                        StopTimeUpdate(departure=StopTimeEvent(delay=delay_s)),
                    ),
                ),
            )
            for trip_id, delay_s in delays.items()
        )
        return StubDelaySource(envelope=FeedEnvelope(entities=entities))

    def lateness(self, trip_id: str) -> DelayResult:
        return resolve_delay(self.envelope, trip_id)
