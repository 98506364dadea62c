"""Protocols for favicon finding strategies and their collaborators."""

from typing import Callable, Optional, Protocol

from faviconfinder.models import FaviconURL, SearchResult

# Invoked exactly once with the outcome of a search.
OnFind = Callable[[SearchResult], None]


class FaviconFinderProtocol(Protocol):
    """Protocol for a favicon finding strategy.

    Note: This only defines the methods a caller composing several strategies depends
    on. The actual finder might define additional methods and attributes.
    """

    url: str

    async def search(self, on_find: Optional[OnFind] = None) -> SearchResult:  # pragma: no cover
        """Search for a favicon of `url`.

        Never raises `FaviconError`: the failure is carried by the returned result.
        """
        ...

    async def find(self) -> FaviconURL:  # pragma: no cover
        """Search for a favicon of `url`.

        `FaviconError` will be raised if no favicon could be found.
        """
        ...


class PageFetcherProtocol(Protocol):
    """Protocol for the transport that retrieves the raw bytes of a page."""

    async def fetch(self, url: str) -> Optional[bytes]:  # pragma: no cover
        """Fetch `url` and return the response body, or None if nothing was received."""
        ...

    async def close(self) -> None:  # pragma: no cover
        """Close down any open connections."""
        ...
