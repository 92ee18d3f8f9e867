from __future__ import annotations

from dataclasses import dataclass

import pytest
from google.transit import gtfs_realtime_pb2

from train_late.adapters.realtime import LiveDelaySource, StubDelaySource
from train_late.domain.exceptions import DecodeError, UpstreamStatus
from train_late.domain.models import MinutesLate, NoDelayData


@dataclass(slots=True)
class FakeFeedProvider:
    payloads: list[bytes]
    calls: int = 0
    error: Exception | None = None

    def fetch_feed(self) -> bytes:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payloads[min(self.calls, len(self.payloads)) - 1]


def _payload(delays: dict[str, int]) -> bytes:
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.header.gtfs_realtime_version = "2.0"
    for trip_id, delay_s in delays.items():
        ent = feed.entity.add()
        ent.id = f"e-{trip_id}"
        ent.trip_update.trip.trip_id = trip_id
        ent.trip_update.stop_time_update.add().departure.delay = delay_s
    return feed.SerializeToString()


def test_live_source_refetches_on_every_lookup() -> None:
    provider = FakeFeedProvider(payloads=[_payload({"7": 300}), _payload({"7": 60})])
    source = LiveDelaySource(feed_provider=provider)

    assert source.lateness("7") == MinutesLate(minutes=5)
    assert source.lateness("7") == MinutesLate(minutes=1)
    assert provider.calls == 2


def test_live_source_reports_no_data_for_unknown_trip() -> None:
    source = LiveDelaySource(feed_provider=FakeFeedProvider([_payload({"7": 300})]))
    assert source.lateness("8") == NoDelayData()


def test_live_source_propagates_fetch_errors() -> None:
    provider = FakeFeedProvider(payloads=[], error=UpstreamStatus(502))
    with pytest.raises(UpstreamStatus):
        LiveDelaySource(feed_provider=provider).lateness("7")


def test_live_source_propagates_decode_errors() -> None:
    provider = FakeFeedProvider(payloads=[b"\x0a\x05ab"])
    with pytest.raises(DecodeError):
        LiveDelaySource(feed_provider=provider).lateness("7")


def test_stub_source_resolves_fixed_delays() -> None:
    source = StubDelaySource.from_delays({"7": 300, "8": -125})

    assert source.lateness("7") == MinutesLate(minutes=5)
    assert source.lateness("8") == MinutesLate(minutes=-2)
    assert source.lateness("9") == NoDelayData()


def test_default_stub_source_has_no_data() -> None:
    assert StubDelaySource().lateness("7") == NoDelayData()
