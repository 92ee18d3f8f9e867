from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from train_late.app.ports.output import IRealtimeFeedProvider
from train_late.config import DEFAULT_FEED_URL
from train_late.domain.exceptions import AuthMissing, NetworkError, UpstreamStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HttpGtfsRealtimeFeedClient(IRealtimeFeedProvider):
    """Fetches the GTFS-Realtime TripUpdates feed over HTTP.

    Notes:
      - One GET per call; no retries and no caching.
      - The credential is sent as `Authorization: apikey <key>`.
      - Timeouts are httpx's defaults.
    """

    api_key: str | None
    url: str = DEFAULT_FEED_URL
    # Injected in tests (httpx.MockTransport).
    transport: httpx.BaseTransport | None = None

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"apikey {self.api_key}"}

    def fetch_feed(self) -> bytes:
        if not self.api_key:
            raise AuthMissing()

        logger.debug("Fetching realtime feed from %s", self.url)
        try:
            with httpx.Client(transport=self.transport) as client:
                resp = client.get(self.url, headers=self._headers())
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning("Realtime feed request failed: %s", exc)
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            logger.warning("Realtime feed responded with HTTP %d", resp.status_code)
            raise UpstreamStatus(resp.status_code)

        return resp.content
