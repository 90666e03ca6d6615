"""Data models for the fetch → extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PageSource:
    """Serialized DOM of a page after the browser finished navigating."""

    url: str
    html: str


@dataclass(frozen=True)
class AnchorRecord:
    """A single ``<a>`` element that has an ``href`` and visible text."""

    href: str
    text: str
