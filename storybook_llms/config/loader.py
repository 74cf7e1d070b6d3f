"""Load run configuration YAML and merge command-line overrides."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_browser_config, _build_refs, _optional_str
from .models import ConfigError, RefConfig, RunConfiguration


@dc.dataclass(slots=True)
class ConfigOverrides:
    """Values supplied on the command line; ``None`` keeps the file value."""

    dist_path: Path | None = None
    summary_base_url: str | None = None
    summary_title: str | None = None
    summary_description: str | None = None
    refs: list[RefConfig] | None = None
    headless: bool | None = None


def load_run_config(
    path: Path | None = None, *, overrides: ConfigOverrides | None = None
) -> RunConfiguration:
    """Build the :class:`RunConfiguration` for one run.

    Parameters
    ----------
    path : Path, optional
        YAML file holding run settings. When ``None`` only ``overrides`` and
        built-in defaults are used.
    overrides : ConfigOverrides, optional
        Command-line values that take precedence over the file.

    Returns
    -------
    RunConfiguration
        Fully resolved configuration with defaults applied.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    ConfigError
        If the YAML is not a mapping, ``dist_path`` is missing, or ``refs`` /
        ``browser`` entries are malformed.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_run_config(overrides=ConfigOverrides(dist_path=Path("dist")))
    >>> config.summary_title
    'Summary'
    """
    overrides = overrides or ConfigOverrides()
    raw = _read_yaml(path) if path is not None else {}

    dist_path = overrides.dist_path or _resolve_dist_path(raw.get("dist_path"), path)
    if dist_path is None:
        msg = "A 'dist_path' pointing at the built Storybook is required."
        raise ConfigError(msg)

    refs = overrides.refs if overrides.refs else _build_refs(raw.get("refs"))
    browser = _build_browser_config(raw.get("browser"))
    if overrides.headless is not None:
        browser.headless = overrides.headless

    return RunConfiguration(
        dist_path=dist_path,
        summary_base_url=_pick(overrides.summary_base_url, raw, "summary_base_url", "/"),
        summary_title=_pick(overrides.summary_title, raw, "summary_title", "Summary"),
        summary_description=_pick(
            overrides.summary_description, raw, "summary_description", ""
        ),
        refs=refs,
        browser=browser,
    )


def _read_yaml(path: Path) -> dict[str, typ.Any]:
    """Return the top-level mapping stored in ``path``."""
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise ConfigError(msg)
    return dict(loaded)


def _resolve_dist_path(value: object | None, config_path: Path | None) -> Path | None:
    """Resolve a configured ``dist_path`` relative to the config file."""
    text = _optional_str(value)
    if text is None:
        return None
    candidate = Path(text).expanduser()
    if not candidate.is_absolute() and config_path is not None:
        candidate = config_path.parent / candidate
    return candidate


def _pick(override: str | None, raw: typ.Mapping[str, typ.Any], key: str, default: str) -> str:
    if override is not None:
        return override
    value = raw.get(key)
    return default if value is None else str(value)


__all__ = ["ConfigOverrides", "load_run_config"]
