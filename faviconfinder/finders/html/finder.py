"""Favicon finder that reads icon declarations from a page's HTML head"""

import logging
from typing import Optional

from faviconfinder.configs import settings
from faviconfinder.constants import DEFAULT_PREFERRED_TYPE
from faviconfinder.exceptions import FaviconError, FaviconErrorKind
from faviconfinder.finders.html.fetcher import PageFetcher
from faviconfinder.finders.html.link_extractor import HeadLinkExtractor
from faviconfinder.finders.html.resolver import FaviconResolver
from faviconfinder.finders.protocol import OnFind, PageFetcherProtocol
from faviconfinder.models import FaviconType, FaviconURL, SearchResult

logger = logging.getLogger(__name__)


class HTMLFaviconFinder:
    """Find the favicon of a page by downloading it and parsing the links in its head.

    A search performs a single fetch, then parses and resolves synchronously. Nothing
    is shared between searches, so finders for different pages can run concurrently.
    """

    url: str
    preferred_type: FaviconType
    log_enabled: bool

    def __init__(
        self,
        url: str,
        preferred_type: Optional[FaviconType] = None,
        log_enabled: Optional[bool] = None,
        fetcher: Optional[PageFetcherProtocol] = None,
    ) -> None:
        self.url = url
        # Stored for callers and facades. Ranking uses a fixed order and never reads it.
        self.preferred_type = preferred_type or DEFAULT_PREFERRED_TYPE
        self.log_enabled = settings.finder.log_enabled if log_enabled is None else log_enabled
        self.fetcher = fetcher
        self.extractor = HeadLinkExtractor(log_enabled=self.log_enabled)
        self.resolver = FaviconResolver(log_enabled=self.log_enabled)

    async def search(self, on_find: Optional[OnFind] = None) -> SearchResult:
        """Search for the favicon and report the outcome.

        `on_find`, when given, is called exactly once with the same result that is
        returned.
        """
        try:
            favicon = await self.find()
        except FaviconError as e:
            result = SearchResult(url=self.url, error=e)
        else:
            result = SearchResult(url=self.url, favicon=favicon)

        if on_find is not None:
            on_find(result)
        return result

    async def find(self) -> FaviconURL:
        """Search for the favicon, raising `FaviconError` if none could be found."""
        data = await self._fetch()
        if not data:
            if self.log_enabled:
                logger.warning(f"Could NOT get favicon from url: {self.url}, data was empty.")
            raise FaviconError(FaviconErrorKind.EMPTY_RESPONSE, url=self.url)

        try:
            html = data.decode("utf-8")
        except UnicodeDecodeError as e:
            if self.log_enabled:
                logger.warning(
                    f"Could NOT get favicon from url: {self.url}, could not decode HTML."
                )
            raise FaviconError(FaviconErrorKind.DECODE_FAILURE, url=self.url) from e

        try:
            favicon = self.favicon_url(html)
        except FaviconError:
            if self.log_enabled:
                logger.warning(
                    f"Could NOT get favicon from url: {self.url}, "
                    "failed to parse favicon from HTML."
                )
            raise

        if self.log_enabled:
            logger.info(f"Extracted favicon: {favicon.url}")
        return favicon

    def favicon_url(self, html: str) -> FaviconURL:
        """Parse `html` and return the most preferable favicon declared in its head."""
        document = self.extractor.parse(html, self.url)
        links = self.extractor.links(document, self.url)
        base_href = self.extractor.base_href(document)
        return self.resolver.resolve(links, self.url, base_href)

    async def _fetch(self) -> Optional[bytes]:
        if self.fetcher is not None:
            return await self.fetcher.fetch(self.url)

        # A fetcher we create is ours to close.
        async with PageFetcher() as fetcher:
            return await fetcher.fetch(self.url)
