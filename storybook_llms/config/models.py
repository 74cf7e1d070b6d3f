"""Typed dataclasses describing a storybook-llms run configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata


class ConfigError(ValueError):
    """Raised when the run configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class RefConfig:
    """Sibling Storybook linked from the summary ``Optional`` section."""

    title: str
    url: str

    @property
    def llms_url(self) -> str:
        """Return the ``llms.txt`` URL published by the referenced Storybook."""
        return f"{self.url.rstrip('/')}/llms.txt"


@dc.dataclass(slots=True)
class BrowserConfig:
    """Headless browser settings used during extraction."""

    headless: bool = True
    registry_timeout_ms: float = 30_000
    content_timeout_ms: float = 2_000


@dc.dataclass(slots=True)
class RunConfiguration:
    """Inputs for a single extraction and generation run.

    Attributes
    ----------
    dist_path : Path
        Root of the built Storybook (the ``storybook-static`` folder).
    summary_base_url : str
        Base URL prefixed to generated links; defaults to ``"/"``.
    summary_title : str
        Heading used by the summary documents.
    summary_description : str
        Optional paragraph placed under the summary heading.
    refs : list[RefConfig]
        Composed Storybooks to list in the ``Optional`` section.
    browser : BrowserConfig
        Headless browser and timeout settings.
    """

    dist_path: Path
    summary_base_url: str = "/"
    summary_title: str = "Summary"
    summary_description: str = ""
    refs: list[RefConfig] = dc.field(default_factory=list)
    browser: BrowserConfig = dc.field(default_factory=BrowserConfig)

    @property
    def base_url(self) -> str:
        """Return ``summary_base_url`` without its trailing slash."""
        return self.summary_base_url.rstrip("/")


__all__ = ["BrowserConfig", "ConfigError", "RefConfig", "RunConfiguration"]
