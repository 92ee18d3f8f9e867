from __future__ import annotations

from train_late.domain.models.delay import DelayResult, MinutesLate, NoDelayData
from train_late.domain.models.feed import FeedEntity, FeedEnvelope


def seconds_to_minutes(seconds: int) -> int:
    # Truncates toward zero: -59s is 0 minutes, not -1.
    minutes = abs(seconds) // 60
    return minutes if seconds >= 0 else -minutes


def _departure_delay_s(entity: FeedEntity, trip_id: str) -> int | None:
    update = entity.trip_update
    if update is None:
        return None
    if update.trip is None or update.trip.trip_id is None:
        return None
    if update.trip.trip_id != trip_id:
        return None
    if not update.stop_time_updates:
        return None

    departure = update.stop_time_updates[0].departure
    if departure is None:
        return None
    return departure.delay


def resolve_delay(envelope: FeedEnvelope, trip_id: str) -> DelayResult:
    """Return the departure delay of the first usable entity for `trip_id`.

    Entities are scanned in document order. An entity for the right trip that
    has no stop time updates, or whose first update carries no departure
    delay, is skipped and the scan continues.
    """

    for entity in envelope.entities:
        delay_s = _departure_delay_s(entity, trip_id)
        if delay_s is not None:
            return MinutesLate(minutes=seconds_to_minutes(delay_s))
    return NoDelayData()
