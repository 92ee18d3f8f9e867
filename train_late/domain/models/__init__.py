from .delay import DelayResult, MinutesLate, NoDelayData
from .feed import (
    FeedEntity,
    FeedEnvelope,
    StopTimeEvent,
    StopTimeUpdate,
    TripDescriptor,
    TripUpdate,
)
from .schedule import Route, ScheduleIndex, Trip

__all__ = [
    "DelayResult",
    "FeedEntity",
    "FeedEnvelope",
    "MinutesLate",
    "NoDelayData",
    "Route",
    "ScheduleIndex",
    "StopTimeEvent",
    "StopTimeUpdate",
    "Trip",
    "TripDescriptor",
    "TripUpdate",
]
