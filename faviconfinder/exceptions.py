"""faviconfinder specific exceptions."""

from enum import Enum


class FaviconFinderError(Exception):
    """Base error for favicon finding."""


class FaviconErrorKind(Enum):
    """Enum variables with string values representing why a favicon search failed"""

    EMPTY_RESPONSE = "No data was returned for {url}"
    DECODE_FAILURE = "Could not decode the response for {url} as UTF-8 text"
    NO_USABLE_MARKUP = "Could not find usable HTML markup for {url}: {reason}"
    NO_ACCEPTABLE_CANDIDATE = "No acceptable favicon found for {url}: {reason}"

    def format_message(self, **kwargs) -> str:
        """Format the enum string value with the passed in keyword arguments"""
        return self.value.format(**kwargs)


class FaviconError(FaviconFinderError):
    """Terminal failure of a single favicon search.

    Callers branch on `kind` alone; the message only carries diagnostic detail.
    """

    kind: FaviconErrorKind

    def __init__(self, kind: FaviconErrorKind, **kwargs):
        kwargs.setdefault("url", "<unknown>")
        kwargs.setdefault("reason", "unspecified")
        self.kind = kind
        super().__init__(kind.format_message(**kwargs))
