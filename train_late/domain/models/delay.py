from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MinutesLate:
    minutes: int


@dataclass(frozen=True, slots=True)
class NoDelayData:
    """The feed carries no usable delay for the requested trip."""


DelayResult = MinutesLate | NoDelayData
