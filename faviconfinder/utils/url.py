"""URL manipulation utilities for favicon finding"""

from typing import Optional
from urllib.parse import SplitResult, urljoin, urlsplit

from faviconfinder.constants import ABSOLUTE_URL_PREFIXES, HOST_REQUIRED_SCHEMES


def is_absolute_href(href: str) -> bool:
    """Check if href already starts with an http or https scheme."""
    return href.startswith(ABSOLUTE_URL_PREFIXES)


def split_url(url: Optional[str]) -> Optional[SplitResult]:
    """Split `url` into its components, or None if it can't be parsed."""
    if not url or any(char.isspace() or ord(char) < 0x20 for char in url):
        return None
    try:
        parsed = urlsplit(url)
        # Reading the port validates it.
        parsed.port
    except ValueError:
        return None
    return parsed


def is_valid_url(url: str) -> bool:
    """Check if URL is an absolute URL.

    It must have a scheme. http and https URLs also need a host, other schemes such
    as `data:` don't.
    """
    parsed = split_url(url)
    if parsed is None or not parsed.scheme:
        return False
    return bool(parsed.netloc) or parsed.scheme not in HOST_REQUIRED_SCHEMES


def is_hierarchical_url(url: str) -> bool:
    """Check if URL has both a scheme and a host, so relative references can resolve against it."""
    parsed = split_url(url)
    return parsed is not None and bool(parsed.scheme and parsed.netloc)


def join_url(base: str, path: str) -> Optional[str]:
    """Join base URL with path, or None if either can't be parsed."""
    try:
        return urljoin(base, path)
    except ValueError:
        return None


def parse_absolute_url(url: Optional[str]) -> Optional[str]:
    """Return `url` unchanged if it is a valid absolute URL, otherwise None."""
    return url if url and is_valid_url(url) else None


def resolve_base_url(page_url: str, base_href: Optional[str]) -> str:
    """Return the URL relative references in a document resolve against.

    A `<base href>` wins when it resolves against the page URL to a URL with a scheme
    and a host, otherwise the page URL itself is the base.
    """
    if base_href:
        base_url = join_url(page_url, base_href)
        if base_url and is_hierarchical_url(base_url):
            return base_url
    return page_url


def resolve_href(href: str, page_url: str, base_href: Optional[str] = None) -> Optional[str]:
    """Resolve a link href to an absolute URL, or None if that isn't possible.

    Hrefs starting with http:// or https:// are taken as they are. Anything else is
    resolved against the document base following RFC 3986, so hrefs with a scheme of
    their own, like `data:` URIs, come back unchanged.
    """
    if is_absolute_href(href):
        return parse_absolute_url(href)

    if not href:
        return None

    return parse_absolute_url(join_url(resolve_base_url(page_url, base_href), href))
