from __future__ import annotations

from abc import ABC, abstractmethod


class IRealtimeFeedProvider(ABC):
    """Port for fetching the raw GTFS-Realtime TripUpdates payload."""

    @abstractmethod
    def fetch_feed(self) -> bytes:
        raise NotImplementedError
