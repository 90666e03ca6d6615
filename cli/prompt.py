"""Interactive URL prompt with a bounded number of attempts."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import typer

from anchorscan.scraper.validator import is_valid_url

logger = logging.getLogger(__name__)

PROMPT_TEXT = "Please Enter a URL"


def ask_for_url() -> str:
    """Show ``Please Enter a URL: `` and return the raw line (may be empty)."""
    return typer.prompt(PROMPT_TEXT, default="", show_default=False)


def read_valid_url(
    max_attempts: int,
    ask: Callable[[], str] = ask_for_url,
) -> Optional[str]:
    """Prompt until a valid http(s) URL is entered or *max_attempts* are used.

    Empty input counts as an attempt like any other invalid value, so the
    loop always ends.  Returns the stripped URL, or ``None`` when every
    attempt was rejected or input ended early.
    """
    for attempt in range(1, max_attempts + 1):
        try:
            candidate = ask()
        except (typer.Abort, EOFError):
            # stdin closed before a valid URL arrived.
            typer.echo("", err=True)
            logger.debug("Input ended after %d attempt(s)", attempt - 1)
            return None
        if is_valid_url(candidate):
            return candidate.strip()

        logger.debug("Rejected URL input %r (attempt %d/%d)", candidate, attempt, max_attempts)
        typer.echo(f"⚠️ Not a valid http(s) URL ({attempt}/{max_attempts}).", err=True)

    return None
