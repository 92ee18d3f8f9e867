from __future__ import annotations

import pytest
from google.transit import gtfs_realtime_pb2

from train_late.adapters.realtime.gtfs_realtime_decoder import decode_feed
from train_late.domain.algorithms.delay_resolver import resolve_delay
from train_late.domain.exceptions import DecodeError
from train_late.domain.models import MinutesLate, NoDelayData


def _feed() -> gtfs_realtime_pb2.FeedMessage:
    feed = gtfs_realtime_pb2.FeedMessage()
    feed.header.gtfs_realtime_version = "2.0"
    feed.header.timestamp = 1_700_000_000
    return feed


def _headerless_feed() -> bytes:
    feed = gtfs_realtime_pb2.FeedMessage()
    ent = feed.entity.add()
    ent.trip_update.trip.trip_id = "7"
    ent.trip_update.stop_time_update.add().departure.delay = 300
    return feed.SerializePartialToString()


def test_decode_maps_present_fields() -> None:
    feed = _feed()
    ent = feed.entity.add()
    ent.id = "e1"
    ent.trip_update.trip.trip_id = "7"
    stu = ent.trip_update.stop_time_update.add()
    stu.stop_sequence = 3
    stu.departure.delay = 300

    envelope = decode_feed(feed.SerializeToString())

    assert len(envelope.entities) == 1
    entity = envelope.entities[0]
    assert entity.id == "e1"
    assert entity.trip_update is not None
    assert entity.trip_update.trip is not None
    assert entity.trip_update.trip.trip_id == "7"
    first = entity.trip_update.stop_time_updates[0]
    assert first.departure is not None and first.departure.delay == 300


def test_decode_keeps_absent_fields_as_none() -> None:
    feed = _feed()
    vehicle_only = feed.entity.add()
    vehicle_only.id = "vehicle"
    vehicle_only.vehicle.trip.trip_id = "7"

    no_delay = feed.entity.add()
    no_delay.id = "no-delay"
    no_delay.trip_update.trip.route_id = "T1"
    no_delay.trip_update.stop_time_update.add().departure.time = 1_700_000_100
    no_delay.trip_update.stop_time_update.add().arrival.delay = 60

    envelope = decode_feed(feed.SerializeToString())

    assert envelope.entities[0].trip_update is None

    update = envelope.entities[1].trip_update
    assert update is not None
    assert update.trip is not None
    assert update.trip.trip_id is None
    first, second = update.stop_time_updates
    assert first.departure is not None
    assert first.departure.delay is None
    assert second.departure is None


def test_decode_then_resolve_scenario() -> None:
    feed = _feed()
    a = feed.entity.add()
    a.id = "A"
    a.trip_update.trip.trip_id = "5"
    b = feed.entity.add()
    b.id = "B"
    b.trip_update.trip.trip_id = "7"
    b.trip_update.stop_time_update.add().departure.delay = 300

    envelope = decode_feed(feed.SerializeToString())

    assert resolve_delay(envelope, "7") == MinutesLate(minutes=5)
    assert resolve_delay(envelope, "5") == NoDelayData()
    assert resolve_delay(envelope, "99") == NoDelayData()


def test_decode_empty_feed_has_no_entities() -> None:
    envelope = decode_feed(_feed().SerializeToString())
    assert envelope.entities == ()


@pytest.mark.parametrize(
    "content",
    [
        b"",
        _headerless_feed(),
        b"\x0a\x05ab",  # header field claims 5 bytes, only 2 follow
        b"\xff\xff\xff\xff",
    ],
    ids=["empty", "headerless", "truncated", "garbage"],
)
def test_decode_rejects_invalid_payload(content: bytes) -> None:
    with pytest.raises(DecodeError):
        decode_feed(content)


def test_decode_rejects_non_utf8_trip_id() -> None:
    feed = _feed()
    ent = feed.entity.add()
    ent.id = "e1"
    ent.trip_update.trip.trip_id = "ZZZZ"
    content = feed.SerializeToString().replace(b"ZZZZ", b"\xff\xfe\xfd\xfc")

    with pytest.raises(DecodeError):
        decode_feed(content)
