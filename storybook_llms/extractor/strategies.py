"""Prioritized lookups for the Storybook story registry.

Storybook reshaped its preview internals between major versions: 8.x offers
``preview.extract()``, 7.x keeps CSF files on ``preview.storyStore`` behind
``cacheAllCSFFiles()``, and older builds expose plain maps on the store. Each
shape is handled by one :class:`ExtractionStrategy`; :func:`select_entries`
runs them in :data:`STRATEGIES` order and keeps the first that yields data.
Supporting a new shape means appending a strategy.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from playwright.sync_api import Error as PlaywrightError

from . import scripts
from .errors import RegistryNotFoundError, RegistryShapeUnsupportedError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from storybook_llms.browser import PageHandle

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class RegistryShape:
    """Observed structure of ``window.__STORYBOOK_PREVIEW__``.

    Attributes
    ----------
    preview_keys : tuple[str, ...]
        Own property names of the preview object.
    has_extract : bool
        Whether ``preview.extract`` is callable.
    store_key : str or None
        Attribute holding the story store (``storyStore`` or
        ``storyStoreValue``), when present.
    store_keys : tuple[str, ...]
        Own property names of the story store.
    has_cache_all_csf_files, has_cached_csf_files, has_cache, has_stories : bool
        Presence of the legacy store members.
    """

    preview_keys: tuple[str, ...] = ()
    has_extract: bool = False
    store_key: str | None = None
    store_keys: tuple[str, ...] = ()
    has_cache_all_csf_files: bool = False
    has_cached_csf_files: bool = False
    has_cache: bool = False
    has_stories: bool = False

    @classmethod
    def from_probe(cls, payload: cabc.Mapping[str, typ.Any]) -> RegistryShape:
        """Build a shape from the :data:`scripts.PROBE_REGISTRY` result."""
        return cls(
            preview_keys=tuple(payload.get("previewKeys") or ()),
            has_extract=bool(payload.get("hasExtract")),
            store_key=payload.get("storeKey"),
            store_keys=tuple(payload.get("storeKeys") or ()),
            has_cache_all_csf_files=bool(payload.get("hasCacheAllCsfFiles")),
            has_cached_csf_files=bool(payload.get("hasCachedCsfFiles")),
            has_cache=bool(payload.get("hasCache")),
            has_stories=bool(payload.get("hasStories")),
        )


@dc.dataclass(frozen=True, slots=True)
class ExtractionStrategy:
    """A registry lookup guarded by a predicate over :class:`RegistryShape`."""

    name: str
    script: str
    predicate: cabc.Callable[[RegistryShape], bool]

    def matches(self, shape: RegistryShape) -> bool:
        """Return ``True`` when this strategy can read ``shape``."""
        return self.predicate(shape)

    def extract(
        self, page: PageHandle, shape: RegistryShape
    ) -> list[dict[str, typ.Any]] | None:
        """Evaluate the strategy script, returning normalized entries or ``None``."""
        return page.evaluate(self.script, shape.store_key)


STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy(
        "preview-extract", scripts.PREVIEW_EXTRACT, lambda shape: shape.has_extract
    ),
    ExtractionStrategy(
        "cache-all-csf-files",
        scripts.CACHE_ALL_CSF_FILES,
        lambda shape: shape.has_cache_all_csf_files,
    ),
    ExtractionStrategy(
        "cached-csf-files",
        scripts.CACHED_CSF_FILES,
        lambda shape: shape.has_cached_csf_files,
    ),
    ExtractionStrategy("store-cache", scripts.STORE_CACHE, lambda shape: shape.has_cache),
    ExtractionStrategy(
        "store-stories", scripts.STORE_STORIES, lambda shape: shape.has_stories
    ),
)


def probe_registry(page: PageHandle) -> RegistryShape:
    """Inspect the preview object on ``page`` and return its shape.

    Raises
    ------
    RegistryNotFoundError
        If the preview global disappeared between waiting and probing.
    """
    payload = page.evaluate(scripts.PROBE_REGISTRY)
    if not payload:
        raise RegistryNotFoundError
    shape = RegistryShape.from_probe(payload)
    logger.debug("Preview object keys: %s", ", ".join(shape.preview_keys))
    logger.debug("Story store (%s) keys: %s", shape.store_key, ", ".join(shape.store_keys))
    return shape


def select_entries(
    page: PageHandle,
    shape: RegistryShape,
    strategies: cabc.Sequence[ExtractionStrategy] = STRATEGIES,
) -> list[dict[str, typ.Any]]:
    """Run ``strategies`` in order and return the first non-null result.

    Parameters
    ----------
    page : PageHandle
        Page with the Storybook preview loaded.
    shape : RegistryShape
        Result of :func:`probe_registry` for ``page``.
    strategies : Sequence[ExtractionStrategy], optional
        Lookups to try; defaults to :data:`STRATEGIES`.

    Returns
    -------
    list[dict[str, Any]]
        Normalized registry entries marshalled from the page.

    Raises
    ------
    RegistryShapeUnsupportedError
        If no strategy matches ``shape`` or every matching strategy finds no
        data. The error lists the observed preview and store keys and is
        chained to the last in-page error, if any.
    """
    last_error: PlaywrightError | None = None
    for strategy in strategies:
        if not strategy.matches(shape):
            continue
        try:
            entries = strategy.extract(page, shape)
        except PlaywrightError as exc:
            logger.debug("Strategy %s failed: %s", strategy.name, exc)
            last_error = exc
            continue
        if entries is not None:
            logger.info(
                "Read %d registry entries using the %s strategy",
                len(entries),
                strategy.name,
            )
            return list(entries)
        logger.debug("Strategy %s found no data", strategy.name)
    raise RegistryShapeUnsupportedError(shape.preview_keys, shape.store_keys) from last_error


__all__ = [
    "STRATEGIES",
    "ExtractionStrategy",
    "RegistryShape",
    "probe_registry",
    "select_entries",
]
