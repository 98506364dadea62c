"""Constants for favicon finding"""

from faviconfinder.models import FaviconType

# `rel` values a `<link>` must carry to be considered at all.
ACCEPTABLE_ICON_TYPES: frozenset[FaviconType] = frozenset(FaviconType)

# Ranking among the acceptable types, most preferred first. Acceptable types that
# are missing here are collected but can never be selected.
FAVICON_TYPE_PRIORITY: tuple[FaviconType, ...] = (
    FaviconType.APPLE_TOUCH_ICON,
    FaviconType.APPLE_TOUCH_ICON_PRECOMPOSED,
    FaviconType.SHORTCUT_ICON,
    FaviconType.ICON,
)

if not ACCEPTABLE_ICON_TYPES.issuperset(FAVICON_TYPE_PRIORITY):
    raise RuntimeError("Every ranked favicon type must also be an acceptable icon type")

# Type reported as the caller's preference when none is given.
DEFAULT_PREFERRED_TYPE: FaviconType = FaviconType.APPLE_TOUCH_ICON

HEAD_SELECTOR: str = "head"
LINK_SELECTOR: str = "link"
BASE_SELECTOR: str = "base"

ABSOLUTE_URL_PREFIXES: tuple[str, ...] = ("http://", "https://")
HOST_REQUIRED_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# HTTP request configuration. The User-Agent comes from settings.
REQUEST_HEADERS: dict[str, str] = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Dest": "document",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-User": "?1",
}
