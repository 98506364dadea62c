"""Favicon finding strategies"""

from faviconfinder.finders.html import HTMLFaviconFinder
from faviconfinder.finders.protocol import FaviconFinderProtocol, PageFetcherProtocol

__all__ = ["FaviconFinderProtocol", "HTMLFaviconFinder", "PageFetcherProtocol"]
