from .realtime import (
    AuthMissing,
    DecodeError,
    NetworkError,
    RealtimeError,
    UpstreamStatus,
)
from .schedule import MalformedRecord, ScheduleError, SourceUnavailable

__all__ = [
    "AuthMissing",
    "DecodeError",
    "MalformedRecord",
    "NetworkError",
    "RealtimeError",
    "ScheduleError",
    "SourceUnavailable",
    "UpstreamStatus",
]
