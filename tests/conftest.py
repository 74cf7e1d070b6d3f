"""Shared fixtures: an in-memory Storybook standing in for headless Chromium."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from storybook_llms.extractor import scripts

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass
class FakeStorybook:
    """Scriptable browser capability.

    ``results`` maps a script constant to the value ``page.evaluate`` returns
    for it (an exception instance is raised instead). ``docs_html`` maps a
    docs URL to the inner HTML of its ``.sbdocs-content`` container; URLs
    that are absent time out. ``goto_error`` and ``close_error`` are raised
    by every page's ``goto`` and ``close`` when set.
    """

    results: dict[str, typ.Any] = dc.field(default_factory=dict)
    docs_html: dict[str, str] = dc.field(default_factory=dict)
    preview_ready: bool = True
    goto_error: Exception | None = None
    close_error: Exception | None = None
    pages: list[FakePage] = dc.field(default_factory=list)

    def new_page(self) -> FakePage:
        page = FakePage(self)
        self.pages.append(page)
        return page


@dc.dataclass
class FakePage:
    storybook: FakeStorybook
    url: str | None = None
    closed: bool = False
    evaluated: list[str] = dc.field(default_factory=list)

    def goto(self, url: str) -> None:
        if self.storybook.goto_error is not None:
            raise self.storybook.goto_error
        self.url = url

    def wait_for_function(self, expression: str, *, timeout: float | None = None) -> None:
        if not self.storybook.preview_ready:
            msg = f"Timeout {timeout}ms exceeded."
            raise PlaywrightTimeoutError(msg)

    def evaluate(self, expression: str, arg: typ.Any = None) -> typ.Any:
        self.evaluated.append(expression)
        result = self.storybook.results.get(expression)
        if isinstance(result, Exception):
            raise result
        return result

    def wait_for_selector(
        self, selector: str, *, state: str | None = None, timeout: float | None = None
    ) -> None:
        if self.url not in self.storybook.docs_html:
            msg = f"Timeout {timeout}ms exceeded waiting for {selector}."
            raise PlaywrightTimeoutError(msg)

    def inner_html(self, selector: str) -> str:
        if self.url is None:
            msg = "page has not navigated"
            raise PlaywrightError(msg)
        return self.storybook.docs_html[self.url]

    def close(self) -> None:
        if self.storybook.close_error is not None:
            raise self.storybook.close_error
        self.closed = True


def component_entry(**overrides: typ.Any) -> dict[str, typ.Any]:
    """Return a marshalled registry entry for a documented Button component."""
    entry: dict[str, typ.Any] = {
        "id": "components-button",
        "title": "Components/Button",
        "fileName": "./src/Button.stories.tsx",
        "description": "Buttons trigger actions.\nUse sparingly.",
        "component": {
            "description": "",
            "props": {
                "variant": {
                    "type": {
                        "name": "enum",
                        "value": [{"value": "primary"}, {"value": "secondary"}],
                    },
                    "required": True,
                    "defaultValue": {"value": "primary"},
                    "description": "Visual style\nof the button.",
                },
                "children": {"type": {"name": "node"}, "required": False},
                "onClick": {
                    "type": {"name": "signature", "value": [{"value": "function"}]},
                    "required": False,
                },
            },
        },
        "subcomponents": {},
        "stories": [
            {
                "id": "components-button--primary",
                "name": "Primary",
                "docsOnly": False,
                "description": "The main call to action.",
                "sourceCode": "<Button variant=\"primary\">Go</Button>",
            }
        ],
    }
    entry.update(overrides)
    return entry


def prose_entry(**overrides: typ.Any) -> dict[str, typ.Any]:
    """Return a marshalled registry entry for an MDX introduction page."""
    entry: dict[str, typ.Any] = {
        "id": "intro",
        "title": "Introduction",
        "fileName": "./src/Intro.mdx",
        "description": "",
        "component": None,
        "subcomponents": None,
        "stories": [
            {
                "id": "intro--page",
                "name": "Page",
                "docsOnly": True,
                "description": "",
                "sourceCode": "",
            }
        ],
    }
    entry.update(overrides)
    return entry


def registry_results(
    entries: cabc.Sequence[typ.Any] | None, **shape: typ.Any
) -> dict[str, typ.Any]:
    """Return evaluate results for a Storybook 8 style preview."""
    probe = {
        "previewKeys": ["storyStoreValue", "extract"],
        "hasExtract": True,
        "storeKey": "storyStoreValue",
        "storeKeys": ["cache", "cachedCSFFiles"],
    }
    probe.update(shape)
    return {scripts.PROBE_REGISTRY: probe, scripts.PREVIEW_EXTRACT: entries}


@pytest.fixture
def fake_storybook() -> FakeStorybook:
    return FakeStorybook()


@pytest.fixture
def storybook_build(tmp_path: Path) -> Path:
    """Create a minimal Storybook build folder."""
    dist = tmp_path / "storybook-static"
    (dist / "assets").mkdir(parents=True)
    (dist / "iframe.html").write_text("<html><body></body></html>\n", encoding="utf-8")
    (dist / "index.html").write_text("<html></html>\n", encoding="utf-8")
    (dist / "assets" / "preview.js").write_text("console.log(1);\n", encoding="utf-8")
    return dist


@pytest.fixture
def button_entry() -> dict[str, typ.Any]:
    return component_entry()


@pytest.fixture
def intro_entry() -> dict[str, typ.Any]:
    return prose_entry()


@pytest.fixture
def make_registry() -> cabc.Callable[..., dict[str, typ.Any]]:
    return registry_results
