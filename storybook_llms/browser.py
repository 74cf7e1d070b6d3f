"""Headless browser capability used to read a built Storybook.

Extraction code depends only on the narrow :class:`BrowserCapability` and
:class:`PageHandle` protocols below. Playwright's synchronous
``BrowserContext`` and ``Page`` satisfy them directly, and tests substitute
in-memory fakes.

Example
-------
>>> from pathlib import Path
>>> with open_storybook_browser(Path("storybook-static")) as browser:  # doctest: +SKIP
...     page = browser.new_page()
...     page.goto("http://localhost/iframe.html")
"""

from __future__ import annotations

import contextlib
import logging
import typing as typ

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .assets import StaticAssetResolver

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)


class PageHandle(typ.Protocol):
    """Single page able to navigate, evaluate script, and query the DOM."""

    def goto(self, url: str) -> typ.Any: ...

    def wait_for_function(
        self, expression: str, *, timeout: float | None = None
    ) -> typ.Any: ...

    def evaluate(self, expression: str, arg: typ.Any = None) -> typ.Any: ...

    def wait_for_selector(
        self, selector: str, *, state: str | None = None, timeout: float | None = None
    ) -> typ.Any: ...

    def inner_html(self, selector: str) -> str: ...

    def close(self) -> None: ...


class BrowserCapability(typ.Protocol):
    """Factory for pages sharing one context and request interceptor."""

    def new_page(self) -> PageHandle: ...


def close_page(page: PageHandle) -> None:
    """Close ``page``; a target that is already gone is logged, not raised."""
    try:
        page.close()
    except PlaywrightError:
        logger.debug("Failed to close page", exc_info=True)


@contextlib.contextmanager
def open_storybook_browser(
    dist_path: Path, *, headless: bool = True
) -> cabc.Iterator[BrowserCapability]:
    """Launch Chromium with every request served from ``dist_path``.

    Parameters
    ----------
    dist_path : Path
        Root of the built Storybook.
    headless : bool, optional
        Run Chromium without a window. Defaults to ``True``.

    Yields
    ------
    BrowserCapability
        A browser context with CSP bypass enabled and the static asset
        resolver installed for all of its pages.

    Notes
    -----
    The browser is closed and Playwright stopped on every exit path,
    including exceptions raised by the caller.
    """
    resolver = StaticAssetResolver(dist_path)
    with sync_playwright() as playwright:
        browser = playwright.chromium.launch(headless=headless)
        try:
            context = browser.new_context(bypass_csp=True)
            context.route("**/*", resolver.handle)
            logger.info("Static file routing configured for %s", resolver.root)
            yield context
        finally:
            browser.close()


__all__ = ["BrowserCapability", "PageHandle", "close_page", "open_storybook_browser"]
