from __future__ import annotations


class RealtimeError(Exception):
    """Base exception for per-request realtime lookup failures."""


class AuthMissing(RealtimeError):
    """Raised when no feed credential is configured."""

    def __init__(self) -> None:
        super().__init__("Realtime API key not configured")


class NetworkError(RealtimeError):
    """Raised on transport-level failures talking to the feed."""


class UpstreamStatus(RealtimeError):
    """Raised when the feed answers with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Realtime feed responded with HTTP {status_code}")
        self.status_code = status_code


class DecodeError(RealtimeError):
    """Raised when the feed body is not a valid GTFS-Realtime message."""
