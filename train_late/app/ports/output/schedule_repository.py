from __future__ import annotations

from abc import ABC, abstractmethod

from train_late.domain.models.schedule import ScheduleIndex


class IScheduleRepository(ABC):
    """Port for loading the static schedule into an in-memory index."""

    @abstractmethod
    def load_schedule(self) -> ScheduleIndex:
        raise NotImplementedError
