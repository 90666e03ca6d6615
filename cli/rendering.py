"""Utilities for rendering extracted links in the CLI."""

from __future__ import annotations

from typing import Iterable

import typer

from anchorscan.scraper.models import AnchorRecord


def format_anchor_record(record: AnchorRecord) -> str:
    """Return the href line and the text line of *record*, followed by a blank line.

    The trailing newline together with the one :func:`typer.echo` appends
    produces the blank separator between records.
    """
    return f"{record.href}\n{record.text}\n"


def echo_anchor_records(records: Iterable[AnchorRecord]) -> int:
    """Print every record to stdout and return how many were printed."""
    count = 0
    for record in records:
        typer.echo(format_anchor_record(record))
        count += 1
    return count
