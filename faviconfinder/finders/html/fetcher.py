"""Async page fetcher for retrieving HTML documents from the web"""

import logging
from typing import Optional

import httpx

from faviconfinder.configs import settings
from faviconfinder.constants import REQUEST_HEADERS
from faviconfinder.utils.http_client import create_http_client

logger = logging.getLogger(__name__)


class PageFetcher:
    """Fetch pages asynchronously using async HTTP client."""

    session: httpx.AsyncClient

    def __init__(self, session: Optional[httpx.AsyncClient] = None) -> None:
        self.session = session or self._create_session()

    @staticmethod
    def _create_session() -> httpx.AsyncClient:
        http_settings = settings.http
        return create_http_client(
            max_connections=http_settings.max_connections,
            connect_timeout=float(http_settings.connect_timeout_sec),
            request_timeout=float(http_settings.request_timeout_sec),
            pool_timeout=float(http_settings.pool_timeout_sec),
            follow_redirects=http_settings.follow_redirects,
            headers={**REQUEST_HEADERS, "User-Agent": http_settings.user_agent},
        )

    async def fetch(self, url: str) -> Optional[bytes]:
        """Fetch URL and return the response body, or None if the request failed.

        The status code is not checked: error pages still carry the site's head.
        """
        try:
            response = await self.session.get(url)
        except httpx.HTTPError as e:
            logger.debug(f"Failed to fetch URL {url}: {e}")
            return None

        logger.debug(f"Fetched {url} with status {response.status_code}")
        return response.content

    async def close(self) -> None:
        """Close HTTP session and release resources."""
        await self.session.aclose()

    async def __aenter__(self) -> "PageFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.close()
        return False
