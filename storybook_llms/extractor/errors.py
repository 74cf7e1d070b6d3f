"""Fatal conditions raised while reading the Storybook registry."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _join_keys(keys: cabc.Iterable[str]) -> str:
    return ", ".join(keys) or "(none)"


class StorybookExtractionError(RuntimeError):
    """Base class for errors that abort an extraction run."""


class EntryPageLoadError(StorybookExtractionError):
    """Raised when the Storybook entry page cannot be opened."""

    def __init__(self, url: str, reason: str = "") -> None:
        self.url = url
        msg = f"Unable to load Storybook entry page {url}."
        if reason:
            msg = f"{msg} {reason}"
        super().__init__(msg)


class RegistryNotFoundError(StorybookExtractionError):
    """Raised when ``window.__STORYBOOK_PREVIEW__`` never appears."""

    def __init__(self, observed_globals: cabc.Sequence[str] = ()) -> None:
        self.observed_globals = tuple(observed_globals)
        msg = (
            "Unable to find Storybook preview (window.__STORYBOOK_PREVIEW__) on "
            "iframe.html. Check that dist_path points at a built Storybook. "
            f"Storybook globals present: {_join_keys(self.observed_globals)}."
        )
        super().__init__(msg)


class RegistryShapeUnsupportedError(StorybookExtractionError):
    """Raised when the registry matches none of the known extraction strategies."""

    def __init__(
        self,
        preview_keys: cabc.Sequence[str] = (),
        store_keys: cabc.Sequence[str] = (),
    ) -> None:
        self.preview_keys = tuple(preview_keys)
        self.store_keys = tuple(store_keys)
        msg = (
            "Unable to find cached CSF files in Storybook store. "
            f"Available preview properties: {_join_keys(self.preview_keys)}. "
            f"Available storyStore properties: {_join_keys(self.store_keys)}. "
            "Please report these properties together with your Storybook version."
        )
        super().__init__(msg)


__all__ = [
    "EntryPageLoadError",
    "RegistryNotFoundError",
    "RegistryShapeUnsupportedError",
    "StorybookExtractionError",
]
