from .delay_source import IDelaySource
from .realtime_feed_provider import IRealtimeFeedProvider
from .schedule_repository import IScheduleRepository

__all__ = [
    "IDelaySource",
    "IRealtimeFeedProvider",
    "IScheduleRepository",
]
