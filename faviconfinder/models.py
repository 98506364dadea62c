"""Data models for favicon finding"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from faviconfinder.exceptions import FaviconError


class FaviconType(str, Enum):
    """Recognized `rel` values of `<link>` elements that declare a favicon."""

    APPLE_TOUCH_ICON = "apple-touch-icon"
    APPLE_TOUCH_ICON_PRECOMPOSED = "apple-touch-icon-precomposed"
    SHORTCUT_ICON = "shortcut icon"
    ICON = "icon"
    ICON_SHORTCUT = "icon shortcut"
    FLUID_ICON = "fluid-icon"
    MASK_ICON = "mask-icon"
    APPLE_TOUCH_STARTUP_IMAGE = "apple-touch-startup-image"

    @classmethod
    def from_rel(cls, rel: str) -> Optional["FaviconType"]:
        """Return the type whose value is exactly `rel`, or None if it isn't recognized."""
        try:
            return cls(rel)
        except ValueError:
            return None


class LinkReference(BaseModel):
    """A `<link>` element found in a document head."""

    model_config = ConfigDict(frozen=True)

    rel: str
    href: str


class FaviconURL(BaseModel):
    """The resolved, absolute location of a favicon and the type it was declared as."""

    model_config = ConfigDict(frozen=True)

    url: str
    type: FaviconType


class SearchResult(BaseModel):
    """Outcome of one favicon search. Exactly one of `favicon` and `error` is set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    url: str
    favicon: Optional[FaviconURL] = None
    error: Optional[FaviconError] = None

    @model_validator(mode="after")
    def validate_outcome(self) -> "SearchResult":
        """Validate that the result holds either a favicon or an error, never both."""
        if (self.favicon is None) == (self.error is None):
            raise ValueError("exactly one of favicon and error must be set")
        return self

    @property
    def success(self) -> bool:
        """Whether the search produced a favicon."""
        return self.favicon is not None
