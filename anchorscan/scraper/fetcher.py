"""Headless Chromium fetcher built on Playwright's sync API."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Tuple

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from anchorscan.config import settings
from anchorscan.scraper.models import PageSource

logger = logging.getLogger(__name__)

# Chromium switches for a maximized, private browsing window.
_BROWSER_ARGS = ["--start-maximized", "--incognito"]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FetchError(RuntimeError):
    """Base class for every failure while loading a page in the browser."""


class BrowserLaunchError(FetchError):
    """Raised when Playwright or the browser binary cannot be started."""


class NavigationTimeoutError(FetchError):
    """Raised when navigation does not complete within the configured timeout."""


class NetworkError(FetchError):
    """Raised for any other navigation failure (DNS, refused connection, ...)."""


# ---------------------------------------------------------------------------
# Fetcher
# ---------------------------------------------------------------------------

class PageFetcher:
    """Load pages in a throw-away headless browser and return their HTML.

    Every :meth:`fetch` call launches its own browser and closes it before
    returning, whether navigation succeeded or not.
    """

    def __init__(
        self,
        executable_path: Optional[Path] = None,
        timeout: Optional[float] = None,
        headless: bool = True,
        viewport: Optional[Tuple[int, int]] = None,
    ) -> None:
        self.executable_path = executable_path
        self.timeout = settings.navigation_timeout if timeout is None else timeout
        self.headless = headless
        self.viewport = viewport or settings.viewport

    @contextmanager
    def session(self) -> Iterator[Page]:
        """Yield a fresh page in a private browser context.

        The browser is closed exactly once when the block exits.

        Raises:
            BrowserLaunchError: If Playwright or Chromium cannot be started.
        """
        try:
            pw = sync_playwright().start()
        except PlaywrightError as exc:
            raise BrowserLaunchError(f"could not start Playwright: {exc}") from exc

        try:
            try:
                browser = pw.chromium.launch(
                    headless=self.headless,
                    executable_path=str(self.executable_path) if self.executable_path else None,
                    args=_BROWSER_ARGS,
                )
            except PlaywrightError as exc:
                raise BrowserLaunchError(f"could not launch Chromium: {exc}") from exc
            logger.debug("Launched Chromium (headless=%s)", self.headless)

            try:
                try:
                    width, height = self.viewport
                    # A new context is incognito: no shared cookies, cache or storage.
                    context = browser.new_context(viewport={"width": width, "height": height})
                    page = context.new_page()
                except PlaywrightError as exc:
                    raise BrowserLaunchError(f"could not open a browser page: {exc}") from exc
                yield page
            finally:
                try:
                    browser.close()
                except PlaywrightError as exc:
                    logger.warning("Chromium did not close cleanly: %s", exc)
                logger.debug("Closed Chromium")
        finally:
            try:
                pw.stop()
            except PlaywrightError as exc:
                logger.warning("Playwright did not stop cleanly: %s", exc)

    def fetch(self, url: str) -> PageSource:
        """Navigate to *url* and return the rendered HTML as a :class:`PageSource`.

        Navigation waits for the ``load`` event.

        Raises:
            BrowserLaunchError: The browser could not be started.
            NavigationTimeoutError: ``load`` did not fire within ``self.timeout`` seconds.
            NetworkError: Navigation failed for any other reason.
        """
        logger.info("Fetching %s (timeout=%.1fs)", url, self.timeout)
        with self.session() as page:
            try:
                page.goto(url, wait_until="load", timeout=self.timeout * 1000)
                html = page.content()
            except PlaywrightTimeoutError as exc:
                raise NavigationTimeoutError(
                    f"page load timed out after {self.timeout:g}s: {url}"
                ) from exc
            except PlaywrightError as exc:
                raise NetworkError(f"could not load {url}: {exc}") from exc

        logger.info("Fetched %d characters from %s", len(html), url)
        return PageSource(url=url, html=html)
