"""anchorscan CLI: print the links of a web page rendered in headless Chromium.

Usage:
    python cli/main.py --help

Flow:
    prompt for URL → validate (bounded attempts) → fetch in browser
    → extract body anchors → print href + text for each

Exit codes:
    0  success (including pages without links)
    1  the page could not be fetched
    2  no valid URL was entered
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from anchorscan.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from anchorscan.config import settings
from anchorscan.logging_config import setup_logging
from anchorscan.scraper import FetchError, PageFetcher, extract_anchors, is_valid_url
from cli.prompt import read_valid_url
from cli.rendering import echo_anchor_records

logger = logging.getLogger(__name__)

EXIT_FETCH_FAILED = 1
EXIT_INVALID_URL = 2

app = typer.Typer(
    name="anchorscan",
    help="Load a page in a headless browser and list its links.",
    add_completion=False,
)


@app.command()
def scan(
    url: Optional[str] = typer.Option(
        None, "--url", help="URL to scan. Prompts interactively when omitted."
    ),
    attempts: int = typer.Option(
        settings.max_url_attempts, "--attempts", min=1,
        help="How many times to prompt for a valid URL.",
    ),
    timeout: float = typer.Option(
        settings.navigation_timeout, "--timeout", min=0.1,
        help="Navigation timeout in seconds.",
    ),
    browser_path: Optional[Path] = typer.Option(
        settings.browser_executable, "--browser-path",
        help="Chromium executable to use instead of Playwright's bundled one.",
    ),
    headless: bool = typer.Option(
        True, "--headless/--headed", help="Run the browser without a window."
    ),
    no_pause: bool = typer.Option(
        False, "--no-pause", help="Exit right after printing instead of waiting for a key."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print the href and text of every link in the page body."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    if url is None:
        url = read_valid_url(attempts)
        if url is None:
            typer.echo(f"❌ No valid URL entered after {attempts} attempts.", err=True)
            raise typer.Exit(code=EXIT_INVALID_URL)
    elif not is_valid_url(url):
        typer.echo(f"❌ Not a valid http(s) URL: {url!r}", err=True)
        raise typer.Exit(code=EXIT_INVALID_URL)

    fetcher = PageFetcher(executable_path=browser_path, timeout=timeout, headless=headless)
    try:
        page = fetcher.fetch(url)
    except FetchError as e:
        logger.error("Fetch failed for %s: %s", url, e)
        typer.echo(f"❌ {type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=EXIT_FETCH_FAILED)

    records = extract_anchors(page.html)
    if not echo_anchor_records(records):
        typer.echo("No links found.", err=True)

    if settings.pause_on_exit and not no_pause:
        # No-op when stdin/stdout is not a terminal.
        typer.pause("Press any key to exit.")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
