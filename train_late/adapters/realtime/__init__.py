from .delay_sources import LiveDelaySource, StubDelaySource
from .gtfs_realtime_decoder import decode_feed
from .http_gtfs_realtime_feed_client import HttpGtfsRealtimeFeedClient

__all__ = [
    "HttpGtfsRealtimeFeedClient",
    "LiveDelaySource",
    "StubDelaySource",
    "decode_feed",
]
