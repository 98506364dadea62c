# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from faviconfinder.cli import cli, result_to_dict
from faviconfinder.exceptions import FaviconError, FaviconErrorKind
from faviconfinder.models import FaviconType, FaviconURL, SearchResult

runner = CliRunner()

PAGES = {
    "https://example.com/": b'<html><head><link rel="icon" href="/favicon.ico"></head></html>',
    "https://broken.example.com/": b"",
}


@pytest.fixture
def mock_page_fetcher(mocker):
    """Patch the CLI's PageFetcher to serve PAGES."""
    fetcher = mocker.MagicMock()
    fetcher.fetch = mocker.AsyncMock(side_effect=lambda url: PAGES[url])
    fetcher_class = mocker.patch("faviconfinder.cli.PageFetcher")
    fetcher_class.return_value.__aenter__.return_value = fetcher
    return fetcher


class TestResultToDict:
    """Tests for result_to_dict."""

    def test_success(self) -> None:
        """Test serializing a successful result."""
        result = SearchResult(
            url="https://example.com/",
            favicon=FaviconURL(url="https://example.com/favicon.ico", type=FaviconType.ICON),
        )

        assert result_to_dict(result) == {
            "url": "https://example.com/",
            "favicon": {"url": "https://example.com/favicon.ico", "type": "icon"},
        }

    def test_failure(self) -> None:
        """Test serializing a failed result."""
        error = FaviconError(FaviconErrorKind.EMPTY_RESPONSE, url="https://example.com/")
        result = SearchResult(url="https://example.com/", error=error)

        assert result_to_dict(result) == {
            "url": "https://example.com/",
            "error": {
                "kind": "EMPTY_RESPONSE",
                "message": "No data was returned for https://example.com/",
            },
        }


class TestFindCommand:
    """Tests for the find command."""

    def test_find_success(self, mock_page_fetcher) -> None:
        """Test printing the favicon of a page."""
        result = runner.invoke(cli, ["find", "https://example.com/"])

        assert result.exit_code == 0
        assert json.loads(result.stdout.strip().splitlines()[-1]) == {
            "url": "https://example.com/",
            "favicon": {"url": "https://example.com/favicon.ico", "type": "icon"},
        }

    def test_find_failure_exit_code(self, mock_page_fetcher) -> None:
        """Test that a failed search exits non-zero after printing every result."""
        result = runner.invoke(
            cli, ["find", "https://example.com/", "https://broken.example.com/", "--no-log"]
        )

        assert result.exit_code == 1
        lines = [json.loads(line) for line in result.stdout.strip().splitlines()[-2:]]
        assert lines[0]["favicon"]["type"] == "icon"
        assert lines[1]["error"]["kind"] == "EMPTY_RESPONSE"
        assert mock_page_fetcher.fetch.await_count == 2

    def test_find_preferred_type(self, mock_page_fetcher) -> None:
        """Test that a preferred type is accepted."""
        result = runner.invoke(
            cli, ["find", "https://example.com/", "--preferred-type", "apple-touch-icon"]
        )

        assert result.exit_code == 0

    def test_find_requires_url(self) -> None:
        """Test that the find command needs at least one URL."""
        result = runner.invoke(cli, ["find"])

        assert result.exit_code != 0
