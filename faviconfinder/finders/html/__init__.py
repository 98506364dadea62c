"""HTML favicon finding components"""

from faviconfinder.finders.html.fetcher import PageFetcher
from faviconfinder.finders.html.finder import HTMLFaviconFinder
from faviconfinder.finders.html.link_extractor import HeadLinkExtractor
from faviconfinder.finders.html.resolver import FaviconResolver

__all__ = ["FaviconResolver", "HTMLFaviconFinder", "HeadLinkExtractor", "PageFetcher"]
