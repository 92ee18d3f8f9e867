from __future__ import annotations

from abc import ABC, abstractmethod

from train_late.domain.models.delay import DelayResult


class IDelaySource(ABC):
    """Port answering "how late is this trip" (live feed or fixed stub)."""

    @abstractmethod
    def lateness(self, trip_id: str) -> DelayResult:
        raise NotImplementedError
