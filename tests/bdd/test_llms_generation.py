"""Behaviour tests for generating llms docs from a Storybook build."""

from __future__ import annotations

import contextlib
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from storybook_llms import cli
from storybook_llms.config import RunConfiguration
from storybook_llms.pipeline import generate_llms_docs

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from conftest import FakeStorybook

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "llms_generation.feature"
scenarios(FEATURE_FILE)

INTRO_URL = "http://localhost/iframe.html?id=intro--docs"


@pytest.fixture
def scenario_state() -> dict[str, typ.Any]:
    return {}


def _factory(storybook: FakeStorybook) -> cabc.Callable[..., typ.Any]:
    @contextlib.contextmanager
    def factory(dist_path: Path, *, headless: bool = True) -> cabc.Iterator[FakeStorybook]:  # noqa: ARG001
        yield storybook

    return factory


@given("a Storybook build with a Button component and an Introduction page")
def given_component_build(
    storybook_build: Path,
    fake_storybook: FakeStorybook,
    make_registry: cabc.Callable[..., dict[str, typ.Any]],
    button_entry: dict[str, typ.Any],
    intro_entry: dict[str, typ.Any],
    scenario_state: dict[str, typ.Any],
) -> None:
    fake_storybook.results = make_registry([button_entry, intro_entry])
    fake_storybook.docs_html = {
        INTRO_URL: (
            '<h1 id="intro">Introduction<a href="#intro" aria-hidden="true">#</a></h1>'
            "<p>Read this first.</p><button>Copy</button>"
        )
    }
    scenario_state["dist"] = storybook_build
    scenario_state["storybook"] = fake_storybook


@given("a Storybook build whose registry shape is unknown")
def given_unknown_registry(
    storybook_build: Path,
    fake_storybook: FakeStorybook,
    make_registry: cabc.Callable[..., dict[str, typ.Any]],
    scenario_state: dict[str, typ.Any],
) -> None:
    fake_storybook.results = make_registry(
        None, hasExtract=False, storeKeys=["importFn", "projectAnnotations"]
    )
    scenario_state["dist"] = storybook_build
    scenario_state["storybook"] = fake_storybook


@when(parsers.parse('I generate the llms docs with base URL "{base_url}"'))
def when_generate(scenario_state: dict[str, typ.Any], base_url: str) -> None:
    config = RunConfiguration(dist_path=scenario_state["dist"], summary_base_url=base_url)
    scenario_state["written"] = generate_llms_docs(
        config, browser_factory=_factory(scenario_state["storybook"])
    )


@when("I run the generate command")
def when_run_command(
    scenario_state: dict[str, typ.Any],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    factory = _factory(scenario_state["storybook"])

    def run(config: RunConfiguration) -> list[Path]:
        return generate_llms_docs(config, browser_factory=factory)

    monkeypatch.setattr(cli, "generate_llms_docs", run)
    with pytest.raises(SystemExit) as excinfo:
        cli.generate(dist_path=scenario_state["dist"])
    scenario_state["exit_code"] = excinfo.value.code
    scenario_state["stderr"] = capsys.readouterr().err


@then("llms.txt links the Button page with its first description line")
def then_summary_links(scenario_state: dict[str, typ.Any]) -> None:
    summary = (scenario_state["dist"] / "llms.txt").read_text(encoding="utf-8")
    assert (
        "- [Components/Button](https://design.example.com/llms/components-button.html)"
        ": Buttons trigger actions."
    ) in summary, "expected the Button bullet with its first description line"
    assert "Use sparingly." not in summary


@then("the Button text page lists its props without children")
def then_button_props(scenario_state: dict[str, typ.Any]) -> None:
    text = (scenario_state["dist"] / "llms" / "components-button.txt").read_text(
        encoding="utf-8"
    )
    assert (
        "| `variant` | `primary secondary` | Yes | primary | Visual style of the button. |"
        in text
    )
    assert "| `onClick` | `function` | No |  |  |" in text
    assert "`children`" not in text
    html = (scenario_state["dist"] / "llms" / "components-button.html").read_text(
        encoding="utf-8"
    )
    soup = BeautifulSoup(html, "html.parser")
    names = [row.td.get_text() for row in soup.select("table.props-table tbody tr")]
    assert names == ["variant", "onClick"]


@then("the Introduction pages contain only the extracted prose")
def then_prose_pages(scenario_state: dict[str, typ.Any]) -> None:
    llms = scenario_state["dist"] / "llms"
    assert (llms / "intro.txt").read_text(encoding="utf-8") == (
        "# Introduction\n\nRead this first."
    )
    soup = BeautifulSoup((llms / "intro.html").read_text(encoding="utf-8"), "html.parser")
    content = soup.select_one(".mdx-content")
    assert content is not None
    assert content.get_text(" ", strip=True) == "Introduction Read this first."


@then("the sitemap lists every generated page")
def then_sitemap(scenario_state: dict[str, typ.Any]) -> None:
    xml = (scenario_state["dist"] / "llms" / "sitemap.xml").read_text(encoding="utf-8")
    soup = BeautifulSoup(xml, "html.parser")
    locs = [loc.get_text() for loc in soup.find_all("loc")]
    assert locs == [
        "https://design.example.com/llms.txt",
        "https://design.example.com/llms/index.html",
        "https://design.example.com/llms/components-button.txt",
        "https://design.example.com/llms/components-button.html",
        "https://design.example.com/llms/intro.txt",
        "https://design.example.com/llms/intro.html",
    ]


@then("the command exits with status 1 naming the observed store keys")
def then_exit_code(scenario_state: dict[str, typ.Any]) -> None:
    assert scenario_state["exit_code"] == 1
    assert "importFn, projectAnnotations" in scenario_state["stderr"]


@then("no documentation files are written")
def then_nothing_written(scenario_state: dict[str, typ.Any]) -> None:
    dist: Path = scenario_state["dist"]
    assert not (dist / "llms.txt").exists()
    assert not (dist / "llms").exists()
