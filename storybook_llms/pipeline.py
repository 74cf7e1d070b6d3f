"""End-to-end run: extract everything from the build, then write the docs.

Extraction finishes before any file is touched, so a fatal registry error
leaves the Storybook build exactly as it was.
"""

from __future__ import annotations

import logging
import typing as typ

from ._constants import ENTRY_DOCUMENT
from .browser import open_storybook_browser
from .extractor import MetadataExtractor, PageContentExtractor, enrich_items
from .generator import LlmsDocsWriter

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    import contextlib
    from pathlib import Path

    from .browser import BrowserCapability
    from .config import RunConfiguration
    from .models import DocumentableItem

    BrowserFactory = cabc.Callable[..., contextlib.AbstractContextManager[BrowserCapability]]

logger = logging.getLogger(__name__)


def _check_build(dist_path: Path) -> None:
    if not dist_path.is_dir():
        msg = f"Storybook build directory not found: {dist_path}"
        raise FileNotFoundError(msg)
    if not (dist_path / ENTRY_DOCUMENT).is_file():
        msg = f"{ENTRY_DOCUMENT} not found in {dist_path}; is this a Storybook build?"
        raise FileNotFoundError(msg)


def extract_storybook_data(
    config: RunConfiguration,
    *,
    browser_factory: BrowserFactory = open_storybook_browser,
) -> list[DocumentableItem]:
    """Return every documentable item with prose page content filled in.

    Raises
    ------
    FileNotFoundError
        If ``config.dist_path`` is not a Storybook build.
    StorybookExtractionError
        If the registry cannot be located or read.
    """
    _check_build(config.dist_path)
    with browser_factory(config.dist_path, headless=config.browser.headless) as browser:
        items = MetadataExtractor(
            browser, registry_timeout_ms=config.browser.registry_timeout_ms
        ).run()
        logger.info("Processing %d store items", len(items))
        pages = PageContentExtractor(browser, timeout_ms=config.browser.content_timeout_ms)
        return enrich_items(items, pages)


def generate_llms_docs(
    config: RunConfiguration,
    *,
    browser_factory: BrowserFactory = open_storybook_browser,
) -> list[Path]:
    """Extract the Storybook data and write all documentation files."""
    items = extract_storybook_data(config, browser_factory=browser_factory)
    return LlmsDocsWriter(config).run(items)


__all__ = ["extract_storybook_data", "generate_llms_docs"]
