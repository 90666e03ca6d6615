"""Link extraction: turns a page's HTML into :class:`AnchorRecord` entries."""

from __future__ import annotations

import logging
from typing import Iterator, List

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from anchorscan.scraper.models import AnchorRecord

logger = logging.getLogger(__name__)

# Every <a> that descends from <body>, in document order.
_BODY_ANCHORS = "body a"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def has_href_and_text(tag: Tag) -> bool:
    """Return ``True`` if *tag* is an ``<a>`` with an ``href`` and visible text.

    Text that is empty or made only of whitespace does not count as visible.
    """
    return (
        tag.name == "a"
        and tag.has_attr("href")
        and bool(tag.get_text().strip())
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_document(html: str) -> BeautifulSoup:
    """Build a DOM from *html* with the stdlib-backed ``html.parser``."""
    return BeautifulSoup(html, "html.parser")


def iter_anchor_records(document: BeautifulSoup) -> Iterator[AnchorRecord]:
    """Yield an :class:`AnchorRecord` for each qualifying anchor in ``<body>``.

    Documents without a ``<body>`` element yield nothing.
    """
    if document.body is None:
        logger.debug("Document has no <body>; nothing to extract")
        return

    for tag in document.select(_BODY_ANCHORS):
        if has_href_and_text(tag):
            yield AnchorRecord(href=tag["href"], text=tag.get_text())


def extract_anchors(html: str) -> List[AnchorRecord]:
    """Parse *html* and return its body anchors that have an href and text.

    Markup the parser refuses degrades to an empty list.
    """
    try:
        document = parse_document(html)
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse page markup: %s", exc)
        return []

    records = list(iter_anchor_records(document))
    logger.info("Extracted %d anchor(s)", len(records))
    return records
