"""Tests for link extraction (parse + filter body anchors).

Everything here runs on literal HTML strings; no browser is involved.
"""

from __future__ import annotations

from unittest.mock import patch

from bs4.builder import ParserRejectedMarkup

from anchorscan.scraper.extractor import (
    extract_anchors,
    has_href_and_text,
    iter_anchor_records,
    parse_document,
)
from anchorscan.scraper.models import AnchorRecord


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_MIXED_BODY = (
    '<body>'
    '<a href="https://a.com">Home</a>'
    '<a href="#">  </a>'
    '<a>NoHref</a>'
    '</body>'
)

_FULL_PAGE = """\
<!DOCTYPE html>
<html>
<head>
  <title>Links</title>
  <link rel="stylesheet" href="/style.css">
</head>
<body>
  <nav>
    <a href="/">Start</a>
    <a href="/about"><span>About</span> us</a>
  </nav>
  <main>
    <p>Read the <a href="https://example.com/docs">docs</a>.</p>
    <a href="https://example.com/img"><img src="logo.png"></a>
    <a href="/">Start</a>
  </main>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# has_href_and_text
# ---------------------------------------------------------------------------

class TestHasHrefAndText:
    def _first(self, html: str, name: str = "a"):
        return parse_document(html).find(name)

    def test_anchor_with_href_and_text(self) -> None:
        assert has_href_and_text(self._first('<a href="/x">X</a>')) is True

    def test_missing_href(self) -> None:
        assert has_href_and_text(self._first("<a>X</a>")) is False

    def test_whitespace_only_text(self) -> None:
        assert has_href_and_text(self._first('<a href="/x"> \n\t </a>')) is False

    def test_empty_text(self) -> None:
        assert has_href_and_text(self._first('<a href="/x"></a>')) is False

    def test_empty_href_still_counts_as_present(self) -> None:
        assert has_href_and_text(self._first('<a href="">X</a>')) is True

    def test_non_anchor_tag(self) -> None:
        assert has_href_and_text(self._first('<link href="/x">X', "link")) is False

    def test_text_from_nested_elements(self) -> None:
        assert has_href_and_text(self._first('<a href="/x"><b>bold</b></a>')) is True


# ---------------------------------------------------------------------------
# extract_anchors
# ---------------------------------------------------------------------------

class TestExtractAnchors:
    def test_filters_whitespace_text_and_missing_href(self) -> None:
        assert extract_anchors(_MIXED_BODY) == [AnchorRecord(href="https://a.com", text="Home")]

    def test_document_order_without_dedup(self) -> None:
        records = extract_anchors(_FULL_PAGE)
        assert [r.href for r in records] == [
            "/",
            "/about",
            "https://example.com/docs",
            "/",
        ]

    def test_inner_text_is_concatenated_and_unmodified(self) -> None:
        records = extract_anchors(_FULL_PAGE)
        assert records[1].text == "About us"
        assert records[2].text == "docs"

    def test_image_only_anchor_is_skipped(self) -> None:
        hrefs = [r.href for r in extract_anchors(_FULL_PAGE)]
        assert "https://example.com/img" not in hrefs

    def test_head_links_are_ignored(self) -> None:
        hrefs = [r.href for r in extract_anchors(_FULL_PAGE)]
        assert "/style.css" not in hrefs

    def test_body_without_anchors(self) -> None:
        assert extract_anchors("<html><body><p>no links</p></body></html>") == []

    def test_no_body_element(self) -> None:
        assert extract_anchors('<a href="https://a.com">Home</a>') == []

    def test_empty_document(self) -> None:
        assert extract_anchors("") == []

    def test_entities_are_decoded(self) -> None:
        html = '<body><a href="/q?a=1&amp;b=2">Fish &amp; Chips</a></body>'
        assert extract_anchors(html) == [AnchorRecord(href="/q?a=1&b=2", text="Fish & Chips")]

    def test_rejected_markup_degrades_to_empty(self) -> None:
        with patch(
            "anchorscan.scraper.extractor.parse_document",
            side_effect=ParserRejectedMarkup("boom"),
        ):
            assert extract_anchors(_MIXED_BODY) == []


class TestIterAnchorRecords:
    def test_is_lazy_and_yields_records(self) -> None:
        records = iter_anchor_records(parse_document(_MIXED_BODY))
        assert next(records) == AnchorRecord(href="https://a.com", text="Home")
        assert list(records) == []
