"""Entrypoint for the command line interface."""

import asyncio
import json
from typing import Any, Optional

import typer

from faviconfinder.configs.app_configs.config_logging import configure_logging
from faviconfinder.finders.html import HTMLFaviconFinder, PageFetcher
from faviconfinder.models import FaviconType, SearchResult

# CLI Options
preferred_type_option = typer.Option(
    None,
    "--preferred-type",
    help="Favicon type the caller would prefer, e.g. 'apple-touch-icon'",
)

log_enabled_option = typer.Option(
    None,
    "--log/--no-log",
    help="Emit diagnostics while searching (defaults to the finder.log_enabled setting)",
)

cli = typer.Typer(no_args_is_help=True, add_completion=False)


def result_to_dict(result: SearchResult) -> dict[str, Any]:
    """Convert a search result into a JSON serializable dictionary."""
    if result.favicon is not None:
        return {
            "url": result.url,
            "favicon": {"url": result.favicon.url, "type": result.favicon.type.value},
        }

    return {
        "url": result.url,
        "error": {"kind": result.error.kind.name, "message": str(result.error)},
    }


async def search_all(
    urls: list[str], preferred_type: Optional[FaviconType], log_enabled: Optional[bool]
) -> list[SearchResult]:
    """Search the favicons of `urls` concurrently, sharing one HTTP session."""
    async with PageFetcher() as fetcher:
        finders = [
            HTMLFaviconFinder(
                url, preferred_type=preferred_type, log_enabled=log_enabled, fetcher=fetcher
            )
            for url in urls
        ]
        return list(await asyncio.gather(*(finder.search() for finder in finders)))


@cli.callback()
def setup():
    """CLI Entrypoint"""
    configure_logging()


@cli.command()
def find(
    urls: list[str] = typer.Argument(..., help="Pages to find favicons for"),
    preferred_type: Optional[FaviconType] = preferred_type_option,
    log_enabled: Optional[bool] = log_enabled_option,
):
    """Find the favicon each page declares in its HTML head.

    Prints one JSON object per page and exits with status 1 if any search failed.
    """
    results = asyncio.run(search_all(urls, preferred_type, log_enabled))

    for result in results:
        typer.echo(json.dumps(result_to_dict(result)))

    if not all(result.success for result in results):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
