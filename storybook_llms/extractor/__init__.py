"""Read component and docs metadata out of a built Storybook."""

from .errors import (
    EntryPageLoadError,
    RegistryNotFoundError,
    RegistryShapeUnsupportedError,
    StorybookExtractionError,
)
from .metadata import MetadataExtractor, normalize_entries, normalize_entry
from .pages import PageContentExtractor, docs_url_for, enrich_items
from .strategies import STRATEGIES, ExtractionStrategy, RegistryShape, select_entries

__all__ = [
    "STRATEGIES",
    "EntryPageLoadError",
    "ExtractionStrategy",
    "MetadataExtractor",
    "PageContentExtractor",
    "RegistryNotFoundError",
    "RegistryShape",
    "RegistryShapeUnsupportedError",
    "StorybookExtractionError",
    "docs_url_for",
    "enrich_items",
    "normalize_entries",
    "normalize_entry",
    "select_entries",
]
