"""faviconfinder: find the favicon a web page declares in its HTML head."""

from faviconfinder.exceptions import FaviconError, FaviconErrorKind
from faviconfinder.finders import HTMLFaviconFinder
from faviconfinder.models import FaviconType, FaviconURL, SearchResult

__all__ = [
    "FaviconError",
    "FaviconErrorKind",
    "FaviconType",
    "FaviconURL",
    "HTMLFaviconFinder",
    "SearchResult",
]
