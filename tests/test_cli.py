"""Tests for the ``storybook-llms generate`` command."""

from __future__ import annotations

import contextlib
import typing as typ
from pathlib import Path

import pytest
from playwright.sync_api import Error as PlaywrightError

from storybook_llms import cli
from storybook_llms.cli import generate
from storybook_llms.config import RefConfig
from storybook_llms.extractor import RegistryNotFoundError, scripts
from storybook_llms.pipeline import generate_llms_docs

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture

    from conftest import FakeStorybook
    from storybook_llms.config import RunConfiguration


@pytest.fixture
def run_docs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture
) -> MagicMock:
    monkeypatch.chdir(tmp_path)
    return mocker.patch(
        "storybook_llms.cli.generate_llms_docs",
        return_value=[tmp_path / "dist" / "llms.txt", tmp_path / "dist" / "llms" / "a.txt"],
    )


def test_generate_prints_written_paths(
    run_docs: MagicMock, capsys: pytest.CaptureFixture[str]
) -> None:
    generate(
        dist_path=Path("dist"),
        summary_title="Design System",
        ref=["Icons=https://icons.example.com", "Charts=https://charts.example.com/"],
        headless=False,
    )

    config = run_docs.call_args.args[0]
    assert config.dist_path == Path("dist")
    assert config.summary_title == "Design System"
    assert config.refs == [
        RefConfig("Icons", "https://icons.example.com"),
        RefConfig("Charts", "https://charts.example.com/"),
    ]
    assert config.browser.headless is False
    out = capsys.readouterr().out.splitlines()
    assert out == ["wrote dist/llms.txt", "wrote dist/llms/a.txt"]


def test_uses_llms_yaml_from_working_directory(tmp_path: Path, run_docs: MagicMock) -> None:
    (tmp_path / "llms.yaml").write_text(
        "dist_path: sb\nsummary_title: From file\n", encoding="utf-8"
    )
    generate()
    config = run_docs.call_args.args[0]
    assert config.dist_path == Path("sb")
    assert config.summary_title == "From file"


def test_defaults_to_storybook_static(run_docs: MagicMock) -> None:
    generate()
    assert run_docs.call_args.args[0].dist_path == Path("storybook-static")


def test_extraction_failure_exits_with_message(
    run_docs: MagicMock, capsys: pytest.CaptureFixture[str]
) -> None:
    run_docs.side_effect = RegistryNotFoundError(["__STORYBOOK_ADDONS__"])
    with pytest.raises(SystemExit) as excinfo:
        generate(dist_path=Path("dist"))
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert "Unable to find Storybook preview" in captured.err
    assert "__STORYBOOK_ADDONS__" in captured.err
    assert captured.out == ""


def test_in_page_strategy_error_exits_with_message(
    storybook_build: Path,
    fake_storybook: FakeStorybook,
    make_registry: cabc.Callable[..., dict[str, typ.Any]],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """A rejected registry script ends the run with ``error:`` and exit 1."""
    results = make_registry(None)
    results[scripts.PREVIEW_EXTRACT] = PlaywrightError("Error: Cannot call extract()")
    fake_storybook.results = results

    @contextlib.contextmanager
    def factory(dist_path: Path, *, headless: bool = True) -> cabc.Iterator[FakeStorybook]:  # noqa: ARG001
        yield fake_storybook

    def run(config: RunConfiguration) -> list[Path]:
        return generate_llms_docs(config, browser_factory=factory)

    monkeypatch.setattr(cli, "generate_llms_docs", run)
    with pytest.raises(SystemExit) as excinfo:
        generate(dist_path=storybook_build)

    assert excinfo.value.code == 1, "expected a clean exit, not a traceback"
    err = capsys.readouterr().err
    assert "error: Unable to find cached CSF files" in err, err
    assert not (storybook_build / "llms.txt").exists(), "nothing is written on failure"


def test_invalid_ref_exits(run_docs: MagicMock, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        generate(dist_path=Path("dist"), ref=["missing-url"])
    assert "expected TITLE=URL" in capsys.readouterr().err
    run_docs.assert_not_called()


def test_missing_config_file_exits(run_docs: MagicMock) -> None:
    with pytest.raises(SystemExit):
        generate(config=Path("absent.yaml"))
    run_docs.assert_not_called()
