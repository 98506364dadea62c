"""Favicon resolution logic for choosing the best link and making its href absolute"""

import logging
from typing import Iterable, Optional

from faviconfinder.constants import ACCEPTABLE_ICON_TYPES, FAVICON_TYPE_PRIORITY
from faviconfinder.exceptions import FaviconError, FaviconErrorKind
from faviconfinder.models import FaviconType, FaviconURL, LinkReference
from faviconfinder.utils.url import resolve_href

logger = logging.getLogger(__name__)


class FaviconResolver:
    """Select a favicon link by fixed type priority and resolve it to an absolute URL."""

    def __init__(
        self,
        acceptable_types: Iterable[FaviconType] = ACCEPTABLE_ICON_TYPES,
        log_enabled: bool = False,
    ) -> None:
        self.acceptable_types = frozenset(acceptable_types)
        self.log_enabled = log_enabled

    def filter_links(self, links: Iterable[LinkReference]) -> list[LinkReference]:
        """Keep links whose `rel` is exactly one of the acceptable types, in order."""
        return [
            link
            for link in links
            if link.rel and FaviconType.from_rel(link.rel) in self.acceptable_types
        ]

    @staticmethod
    def most_preferable_link(
        links: list[LinkReference],
    ) -> Optional[tuple[LinkReference, FaviconType]]:
        """Return the first link of the highest ranked type present, with that type.

        Types that aren't ranked never win, even when they are the only ones present.
        """
        for favicon_type in FAVICON_TYPE_PRIORITY:
            for link in links:
                if link.rel == favicon_type.value:
                    return link, favicon_type
        return None

    def resolve(
        self,
        links: Iterable[LinkReference],
        page_url: str,
        base_href: Optional[str] = None,
    ) -> FaviconURL:
        """Pick the best favicon among `links` and return its absolute URL.

        `FaviconError` with `NO_ACCEPTABLE_CANDIDATE` is raised if no link ranks or the
        winning href can't be made absolute.
        """
        candidates = self.filter_links(links)

        best = self.most_preferable_link(candidates)
        if best is None:
            if self.log_enabled:
                logger.info(
                    f"No ranked favicon among {len(candidates)} candidate link(s) for {page_url}"
                )
            raise FaviconError(
                FaviconErrorKind.NO_ACCEPTABLE_CANDIDATE,
                url=page_url,
                reason="no ranked favicon link",
            )

        link, favicon_type = best
        url = resolve_href(link.href.strip(), page_url, base_href)
        if url is None:
            if self.log_enabled:
                logger.info(f"Could not resolve favicon href {link.href!r} for {page_url}")
            raise FaviconError(
                FaviconErrorKind.NO_ACCEPTABLE_CANDIDATE,
                url=page_url,
                reason=f"unresolvable href {link.href!r}",
            )

        return FaviconURL(url=url, type=favicon_type)
