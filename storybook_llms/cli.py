"""Cyclopts CLI entrypoint for generating llms.txt docs from a Storybook build.

The ``storybook-llms`` console script loads a built Storybook in headless
Chromium, reads its component and docs registry, and writes ``llms.txt`` plus
per-item text and HTML pages into the build folder. Every option can also be
supplied through an ``INPUT_*`` environment variable, which keeps the command
usable as a CI action step.

Examples
--------
Generate docs for the default build folder:

>>> from storybook_llms.cli import app
>>> app.run(["generate", "--dist-path", "storybook-static"])  # doctest: +SKIP

Link a composed Storybook in the summary:

>>> app.run(
...     ["generate", "--ref", "Icons=https://icons.example.com"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    DEFAULT_CONFIG_NAME,
    ConfigError,
    ConfigOverrides,
    load_run_config,
    parse_ref_spec,
)
from .extractor import StorybookExtractionError
from .pipeline import generate_llms_docs

DEFAULT_DIST_PATH = Path("storybook-static")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="storybook-llms", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config_path(config: Path | None) -> Path | None:
    if config is not None:
        return config
    default = Path(DEFAULT_CONFIG_NAME)
    return default if default.is_file() else None


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _fail(message: str) -> typ.NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(1)


@app.command(help="Generate llms.txt and per-component docs from a Storybook build.")
def generate(
    *,
    dist_path: typ.Annotated[
        Path | None,
        Parameter(help="Built Storybook folder", env_var="INPUT_DIST_PATH"),
    ] = None,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to an llms.yaml config file", env_var="INPUT_CONFIG"),
    ] = None,
    summary_base_url: typ.Annotated[
        str | None,
        Parameter(help="Base URL for generated links", env_var="INPUT_SUMMARY_BASE_URL"),
    ] = None,
    summary_title: typ.Annotated[
        str | None,
        Parameter(help="Title of the summary documents", env_var="INPUT_SUMMARY_TITLE"),
    ] = None,
    summary_description: typ.Annotated[
        str | None,
        Parameter(
            help="Paragraph shown under the summary title",
            env_var="INPUT_SUMMARY_DESCRIPTION",
        ),
    ] = None,
    ref: typ.Annotated[
        list[str] | None,
        Parameter(help="Composed Storybook as TITLE=URL (repeatable)", env_var="INPUT_REF"),
    ] = None,
    headless: typ.Annotated[
        bool | None,
        Parameter(help="Run Chromium without a window", env_var="INPUT_HEADLESS"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Enable debug logging", env_var="INPUT_VERBOSE")
    ] = False,
) -> None:
    """Extract Storybook metadata and write the llms.txt documentation set.

    Parameters
    ----------
    dist_path : Path or None, optional
        Built Storybook folder. Falls back to ``dist_path`` in the config
        file, then to ``storybook-static``.
    config : Path or None, optional
        YAML config; ``llms.yaml`` in the working directory is used when
        present and no path is given.
    summary_base_url, summary_title, summary_description : str or None
        Override the matching config values.
    ref : list[str] or None, optional
        Composed Storybooks given as ``TITLE=URL``; replaces configured refs.
    headless : bool or None, optional
        Override the configured browser mode.
    verbose : bool, optional
        Log at DEBUG level.

    Raises
    ------
    SystemExit
        With status 1 when configuration or extraction fails; the reason is
        printed to stderr and nothing is written.
    """
    _configure_logging(verbose=verbose)
    config_path = _resolve_config_path(config)
    if dist_path is None and config_path is None:
        dist_path = DEFAULT_DIST_PATH

    try:
        overrides = ConfigOverrides(
            dist_path=dist_path,
            summary_base_url=summary_base_url,
            summary_title=summary_title,
            summary_description=summary_description,
            refs=[parse_ref_spec(spec) for spec in ref] if ref else None,
            headless=headless,
        )
        run_config = load_run_config(config_path, overrides=overrides)
        written = generate_llms_docs(run_config)
    except (ConfigError, FileNotFoundError, StorybookExtractionError) as exc:
        _fail(str(exc))

    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``storybook-llms`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
