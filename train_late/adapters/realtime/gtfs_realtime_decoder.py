from __future__ import annotations

from google.protobuf.message import DecodeError as ProtobufDecodeError
from google.transit import gtfs_realtime_pb2

from train_late.domain.exceptions import DecodeError
from train_late.domain.models.feed import (
    FeedEntity,
    FeedEnvelope,
    StopTimeEvent,
    StopTimeUpdate,
    TripDescriptor,
    TripUpdate,
)


def decode_feed(content: bytes) -> FeedEnvelope:
    """Decode a GTFS-Realtime FeedMessage into a domain envelope.

    Optional protobuf fields are checked with HasField, so an absent field
    becomes None rather than its protobuf default (an absent delay is not 0).
    A message missing required fields (header, entity id, trip descriptor)
    is rejected, so an empty body never reads as "no delay data".
    """

    feed = gtfs_realtime_pb2.FeedMessage()
    try:
        feed.ParseFromString(content)
    except ProtobufDecodeError as exc:
        raise DecodeError(f"Invalid GTFS-Realtime payload: {exc}") from exc

    if not feed.IsInitialized():
        missing = ", ".join(feed.FindInitializationErrors())
        raise DecodeError(f"Invalid GTFS-Realtime payload: missing {missing}")

    return FeedEnvelope(entities=tuple(_entity(ent) for ent in feed.entity))


def _text(value: str | bytes) -> str:
    # proto2 hands back raw bytes for strings that are not valid UTF-8.
    if isinstance(value, bytes):
        raise DecodeError("Invalid GTFS-Realtime payload: non UTF-8 string")
    return value


def _entity(ent) -> FeedEntity:
    trip_update = None
    if ent.HasField("trip_update"):
        trip_update = _trip_update(ent.trip_update)
    return FeedEntity(id=_text(ent.id), trip_update=trip_update)


def _trip_update(tu) -> TripUpdate:
    trip = None
    if tu.HasField("trip"):
        trip_id = _text(tu.trip.trip_id) if tu.trip.HasField("trip_id") else None
        trip = TripDescriptor(trip_id=trip_id)
    return TripUpdate(
        trip=trip,
        stop_time_updates=tuple(_stop_time_update(stu) for stu in tu.stop_time_update),
    )


def _stop_time_update(stu) -> StopTimeUpdate:
    departure = None
    if stu.HasField("departure"):
        delay = stu.departure.delay if stu.departure.HasField("delay") else None
        departure = StopTimeEvent(delay=None if delay is None else int(delay))
    return StopTimeUpdate(departure=departure)
