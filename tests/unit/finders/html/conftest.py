# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Fixtures for HTML favicon finder tests."""

from typing import Optional

import pytest

from faviconfinder.finders.html.fetcher import PageFetcher

PAGE_URL = "https://example.com/blog/post"


@pytest.fixture
def page_url() -> str:
    """Return the URL of the page under test."""
    return PAGE_URL


@pytest.fixture
def mock_fetcher(mocker):
    """Create a mock page fetcher returning the given body.

    Returns:
        A factory function that creates a configured fetcher
    """

    def _create_fetcher(body: Optional[bytes]):
        """Create a fetcher whose `fetch` resolves to `body`."""
        fetcher = mocker.MagicMock(spec=PageFetcher)
        fetcher.fetch = mocker.AsyncMock(return_value=body)
        fetcher.close = mocker.AsyncMock()
        return fetcher

    return _create_fetcher
