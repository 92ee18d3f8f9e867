from __future__ import annotations


class ScheduleError(Exception):
    """Base exception for static schedule loading failures (startup-fatal)."""


class SourceUnavailable(ScheduleError):
    """Raised when a reference file cannot be opened."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot open schedule source: {path}")
        self.path = path


class MalformedRecord(ScheduleError):
    """Raised when a data row cannot be decoded as tabular text."""

    def __init__(self, path: str, line: int, reason: str) -> None:
        super().__init__(f"Malformed record in {path} at line {line}: {reason}")
        self.path = path
        self.line = line
        self.reason = reason
