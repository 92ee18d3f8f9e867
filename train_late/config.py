from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

DEFAULT_FEED_URL = "https://api.transport.nsw.gov.au/v1/gtfs/realtime/nswtrains"

DelaySourceKind = Literal["live", "stub"]


def _env_str(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return raw.strip() or None


@dataclass(frozen=True, slots=True)
class Settings:
    """Process configuration, read from the environment.

    Env vars:
      - TFNWS_API_KEY: realtime feed credential (only needed for lateness lookups)
      - TRAIN_LATE_FEED_URL: GTFS-Realtime TripUpdates URL
      - TRAIN_LATE_ROUTES_PATH / TRAIN_LATE_TRIPS_PATH: GTFS reference files
      - TRAIN_LATE_DELAY_SOURCE: live|stub (default: live)
      - TRAIN_LATE_STUB_DELAYS: stub delays, as 'trip:seconds;trip2:seconds'
      - TRAIN_LATE_HOST / TRAIN_LATE_PORT: bind address for `train-late`
    """

    api_key: str | None = None
    feed_url: str = DEFAULT_FEED_URL
    routes_path: str = "data/routes.txt"
    trips_path: str = "data/trips.txt"
    delay_source: DelaySourceKind = "live"
    stub_delays_raw: str | None = None
    host: str = "0.0.0.0"
    port: int = 8080

    @staticmethod
    def from_env() -> "Settings":
        delay_source = (_env_str("TRAIN_LATE_DELAY_SOURCE") or "live").lower()
        if delay_source not in {"live", "stub"}:
            raise ValueError(f"Unsupported TRAIN_LATE_DELAY_SOURCE: {delay_source}")

        return Settings(
            api_key=_env_str("TFNWS_API_KEY"),
            feed_url=_env_str("TRAIN_LATE_FEED_URL") or DEFAULT_FEED_URL,
            routes_path=_env_str("TRAIN_LATE_ROUTES_PATH") or "data/routes.txt",
            trips_path=_env_str("TRAIN_LATE_TRIPS_PATH") or "data/trips.txt",
            delay_source="stub" if delay_source == "stub" else "live",
            stub_delays_raw=_env_str("TRAIN_LATE_STUB_DELAYS"),
            host=_env_str("TRAIN_LATE_HOST") or "0.0.0.0",
            port=int(_env_str("TRAIN_LATE_PORT") or 8080),
        )

    def stub_delays(self) -> dict[str, int]:
        """Parse `stub_delays_raw` into trip_id -> delay seconds.

        Malformed parts are ignored.
        """

        raw = (self.stub_delays_raw or "").strip()
        if not raw:
            return {}
        delays: dict[str, int] = {}
        for part in raw.split(";"):
            part = part.strip()
            if not part or ":" not in part:
                continue
            trip_id, seconds = part.rsplit(":", 1)
            trip_id = trip_id.strip()
            try:
                value = int(seconds.strip())
            except ValueError:
                continue
            if trip_id:
                delays[trip_id] = value
        return delays
