"""Head link extractor for collecting `<link>` declarations from HTML documents"""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from faviconfinder.configs import settings
from faviconfinder.constants import BASE_SELECTOR, HEAD_SELECTOR, LINK_SELECTOR
from faviconfinder.exceptions import FaviconError, FaviconErrorKind
from faviconfinder.models import LinkReference

logger = logging.getLogger(__name__)


class HeadLinkExtractor:
    """Parse HTML leniently and read the `rel` and `href` of every link in its head."""

    def __init__(self, parser: Optional[str] = None, log_enabled: bool = False) -> None:
        self.parser = parser or settings.finder.parser
        self.log_enabled = log_enabled

    def parse(self, html: str, url: str = "<unknown>") -> BeautifulSoup:
        """Parse `html` into a document.

        `rel` is kept as the raw attribute string, so "shortcut icon" stays one value.
        """
        try:
            return BeautifulSoup(html, self.parser, multi_valued_attributes=None)
        except Exception as e:
            if self.log_enabled:
                logger.warning(f"Could not parse HTML due to error: {e}. HTML: {html[:200]!r}")
            raise FaviconError(FaviconErrorKind.NO_USABLE_MARKUP, url=url, reason=str(e)) from e

    def head(self, document: BeautifulSoup, url: str = "<unknown>") -> Tag:
        """Return the head element of `document`."""
        head = document.find(HEAD_SELECTOR)
        if not isinstance(head, Tag):
            if self.log_enabled:
                logger.warning(f"Could not find an HTML head for {url}")
            raise FaviconError(FaviconErrorKind.NO_USABLE_MARKUP, url=url, reason="no head")
        return head

    def links(self, document: BeautifulSoup, url: str = "<unknown>") -> list[LinkReference]:
        """Collect every link in the head of `document`, in document order."""
        head = self.head(document, url)

        try:
            elements = head.select(LINK_SELECTOR)
        except Exception as e:
            if self.log_enabled:
                logger.warning(f"Could not select links in HTML head for {url}: {e}")
            raise FaviconError(FaviconErrorKind.NO_USABLE_MARKUP, url=url, reason=str(e)) from e

        links: list[LinkReference] = []
        for element in elements:
            try:
                links.append(
                    LinkReference(
                        rel=str(element.get("rel") or ""),
                        href=str(element.get("href") or ""),
                    )
                )
            except Exception as e:
                if self.log_enabled:
                    logger.debug(f"Skipping unreadable link {element!r}: {e}")
                continue

        return links

    def base_href(self, document: BeautifulSoup) -> Optional[str]:
        """Return the href of the first `<base>` in the head, if any."""
        head = document.find(HEAD_SELECTOR)
        if not isinstance(head, Tag):
            return None

        for base in head.find_all(BASE_SELECTOR):
            href = base.get("href")
            if href:
                return str(href)
        return None

    def extract_links(self, html: str, url: str = "<unknown>") -> list[LinkReference]:
        """Parse `html` and collect the links in its head."""
        return self.links(self.parse(html, url), url)
