"""Extract rendered MDX docs pages as Markdown.

Docs-only stories have no component metadata worth rendering; their content
lives in the rendered ``.sbdocs-content`` container of the docs view. Failures
for a single page are logged and yield an empty body so the run continues.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from urllib.parse import urlencode

from playwright.sync_api import Error as PlaywrightError

from storybook_llms._constants import (
    DOCS_CONTENT_SELECTOR,
    DOCS_ID_SUFFIX,
    ENTRY_URL,
    STORY_ID_SUFFIX,
)
from storybook_llms.browser import close_page
from storybook_llms.html_to_markdown import convert_html_to_markdown

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from storybook_llms.browser import BrowserCapability, PageHandle
    from storybook_llms.models import DocumentableItem, StoryVariant

logger = logging.getLogger(__name__)


def docs_url_for(story_id: str) -> str:
    """Return the docs-view iframe URL for ``story_id``.

    >>> docs_url_for("intro--page")
    'http://localhost/iframe.html?id=intro--docs'
    """
    docs_id = story_id.replace(STORY_ID_SUFFIX, DOCS_ID_SUFFIX, 1)
    return f"{ENTRY_URL}?{urlencode({'id': docs_id})}"


class PageContentExtractor:
    """Render docs pages in the browser and convert them to Markdown."""

    def __init__(
        self,
        browser: BrowserCapability,
        *,
        timeout_ms: float = 2_000,
        converter: cabc.Callable[[str], str] = convert_html_to_markdown,
    ) -> None:
        self.browser = browser
        self.timeout_ms = timeout_ms
        self.converter = converter

    def extract(self, story_id: str) -> str:
        """Return the Markdown body of the docs page for ``story_id``.

        Navigation errors and a content container that never attaches are
        logged and produce an empty string.
        """
        url = docs_url_for(story_id)
        logger.info("Extracting: %s", url)
        page: PageHandle | None = None
        try:
            page = self.browser.new_page()
            page.goto(url)
            page.wait_for_selector(
                DOCS_CONTENT_SELECTOR, state="attached", timeout=self.timeout_ms
            )
            html = page.inner_html(DOCS_CONTENT_SELECTOR)
        except PlaywrightError:
            logger.warning("Failed to extract %s", url, exc_info=True)
            return ""
        finally:
            if page is not None:
                close_page(page)
        return self.converter(html)


def _enrich_variant(variant: StoryVariant, extractor: PageContentExtractor) -> StoryVariant:
    if not variant.parameters.docs_only:
        return variant
    content = extractor.extract(variant.id)
    return dc.replace(variant, parameters=dc.replace(variant.parameters, full_source=content))


def enrich_items(
    items: cabc.Iterable[DocumentableItem], extractor: PageContentExtractor
) -> list[DocumentableItem]:
    """Return copies of ``items`` whose docs-only variants carry page content.

    Items are processed sequentially in order; the input records are left
    untouched.
    """
    enriched: list[DocumentableItem] = []
    for item in items:
        variants = tuple(_enrich_variant(variant, extractor) for variant in item.story_variants)
        enriched.append(dc.replace(item, story_variants=variants))
    return enriched


__all__ = ["PageContentExtractor", "docs_url_for", "enrich_items"]
