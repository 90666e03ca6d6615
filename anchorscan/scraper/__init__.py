"""Scraper package: URL validation, browser fetch & link extraction."""

from anchorscan.scraper.extractor import extract_anchors
from anchorscan.scraper.fetcher import (
    BrowserLaunchError,
    FetchError,
    NavigationTimeoutError,
    NetworkError,
    PageFetcher,
)
from anchorscan.scraper.models import AnchorRecord, PageSource
from anchorscan.scraper.validator import is_valid_url

__all__ = [
    "is_valid_url",
    "PageFetcher",
    "extract_anchors",
    "AnchorRecord",
    "PageSource",
    "FetchError",
    "BrowserLaunchError",
    "NavigationTimeoutError",
    "NetworkError",
]
