"""Read the Storybook registry and normalize it into documentable items.

:class:`MetadataExtractor` loads ``iframe.html`` through the browser
capability, waits for the preview global, picks a registry strategy, and turns
the marshalled entries into immutable :class:`~storybook_llms.models.DocumentableItem`
records via :func:`normalize_entries`.

Example
-------
>>> from pathlib import Path
>>> from storybook_llms.browser import open_storybook_browser
>>> with open_storybook_browser(Path("storybook-static")) as browser:  # doctest: +SKIP
...     items = MetadataExtractor(browser).run()
"""

from __future__ import annotations

import logging
import typing as typ

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from storybook_llms._constants import ENTRY_URL
from storybook_llms.browser import close_page
from storybook_llms.models import (
    DocumentableItem,
    StoryParameters,
    StoryVariant,
    build_component_meta,
    is_prose_file,
)

from . import scripts
from .errors import EntryPageLoadError, RegistryNotFoundError
from .strategies import STRATEGIES, ExtractionStrategy, probe_registry, select_entries

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from storybook_llms.browser import BrowserCapability, PageHandle

logger = logging.getLogger(__name__)


class MetadataExtractor:
    """Extract every documentable item from a loaded Storybook."""

    def __init__(
        self,
        browser: BrowserCapability,
        *,
        registry_timeout_ms: float = 30_000,
        strategies: cabc.Sequence[ExtractionStrategy] = STRATEGIES,
    ) -> None:
        """Initialize the extractor.

        Parameters
        ----------
        browser : BrowserCapability
            Context whose pages are served from the Storybook build.
        registry_timeout_ms : float, optional
            How long to wait for ``window.__STORYBOOK_PREVIEW__``.
        strategies : Sequence[ExtractionStrategy], optional
            Registry lookups in priority order.
        """
        self.browser = browser
        self.registry_timeout_ms = registry_timeout_ms
        self.strategies = strategies

    def run(self) -> list[DocumentableItem]:
        """Return the normalized items found in the Storybook registry.

        Raises
        ------
        EntryPageLoadError
            If navigation to the entry page fails.
        RegistryNotFoundError
            If the preview global never appears on the entry page.
        RegistryShapeUnsupportedError
            If the registry matches none of the configured strategies.
        """
        page = self.browser.new_page()
        try:
            self._open_entry_page(page)
            self._wait_for_registry(page)
            shape = probe_registry(page)
            entries = select_entries(page, shape, self.strategies)
        finally:
            close_page(page)
        return normalize_entries(entries)

    @staticmethod
    def _open_entry_page(page: PageHandle) -> None:
        try:
            page.goto(ENTRY_URL)
        except PlaywrightError as exc:
            raise EntryPageLoadError(ENTRY_URL, str(exc)) from exc

    def _wait_for_registry(self, page: PageHandle) -> None:
        try:
            page.wait_for_function(
                scripts.WAIT_FOR_PREVIEW, timeout=self.registry_timeout_ms
            )
        except PlaywrightTimeoutError as exc:
            raise RegistryNotFoundError(_observed_globals(page)) from exc


def _observed_globals(page: PageHandle) -> list[str]:
    """Return the ``__STORYBOOK*`` globals present on ``page`` for diagnostics."""
    try:
        return list(page.evaluate(scripts.STORYBOOK_GLOBALS) or [])
    except PlaywrightError:
        logger.debug("Could not list Storybook globals", exc_info=True)
        return []


def _build_variant(payload: cabc.Mapping[str, typ.Any]) -> StoryVariant:
    return StoryVariant(
        id=str(payload.get("id", "")),
        name=str(payload.get("name", "")),
        parameters=StoryParameters(
            docs_only=bool(payload.get("docsOnly")),
            description=payload.get("description") or "",
            source_code=payload.get("sourceCode") or "",
        ),
    )


def normalize_entry(entry: cabc.Mapping[str, typ.Any]) -> DocumentableItem | None:
    """Convert one marshalled registry entry into a :class:`DocumentableItem`.

    Returns ``None`` for entries without an id or a stories collection. An
    MDX entry without stories becomes a single docs-only variant so its page
    content can be extracted.
    """
    item_id = entry.get("id")
    stories = entry.get("stories")
    if not item_id or stories is None:
        return None

    title = str(entry.get("title") or item_id)
    file_name = str(entry.get("fileName") or "")
    variants = tuple(_build_variant(story) for story in stories)
    if not variants and is_prose_file(file_name):
        variants = (
            StoryVariant(
                id=item_id, name=title, parameters=StoryParameters(docs_only=True)
            ),
        )

    return DocumentableItem(
        id=item_id,
        title=title,
        file_name=file_name,
        component_meta=build_component_meta(
            entry.get("description") or "",
            entry.get("component"),
            entry.get("subcomponents"),
        ),
        story_variants=variants,
    )


def normalize_entries(
    entries: cabc.Iterable[cabc.Mapping[str, typ.Any] | None],
) -> list[DocumentableItem]:
    """Normalize registry entries, skipping invalid ones and duplicate ids."""
    items: list[DocumentableItem] = []
    seen: set[str] = set()
    for entry in entries:
        item = normalize_entry(entry) if isinstance(entry, dict) else None
        if item is None:
            label = (entry.get("title") or entry.get("id")) if isinstance(entry, dict) else None
            logger.warning("Skipping invalid item without stories: %r", label or entry)
            continue
        if item.id in seen:
            logger.warning("Skipping duplicate item id %s", item.id)
            continue
        seen.add(item.id)
        items.append(item)
    return items


__all__ = ["MetadataExtractor", "normalize_entries", "normalize_entry"]
