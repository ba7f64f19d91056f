"""HTTP transport used by the API client."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

import requests

logger = logging.getLogger(__name__)


class CrawlerError(IOError):
    """Raised when a GET request fails or returns a non-2xx status."""


@dataclass(frozen=True)
class Crawler:
    """Fetches raw response bodies over HTTP."""

    timeout: float = 30

    def get(self, url: str, headers: Mapping[str, str]) -> str:
        """Perform a GET request and return the response body as text.

        Args:
            url: Fully composed URL, including any query string.
            headers: Headers to send with the request.

        Raises:
            CrawlerError: If the request fails or returns a non-2xx status.
        """

        logger.debug("GET %s", url)
        with requests.Session() as session:
            session.trust_env = False
            try:
                response = session.get(url, headers=dict(headers), timeout=self.timeout)
            except requests.RequestException as exc:
                logger.warning("GET %s failed: %s", url, exc)
                raise CrawlerError(f"GET {url} failed: {exc}") from exc
        if not 200 <= response.status_code < 300:
            logger.warning("GET %s returned status %s", url, response.status_code)
            raise CrawlerError(
                f"GET {url} failed with status {response.status_code}: {response.text}"
            )
        return response.text
