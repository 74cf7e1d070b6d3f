"""Utility helpers shared by the storybook-llms configuration loader."""

from __future__ import annotations

import typing as typ

from .models import BrowserConfig, ConfigError, RefConfig

DEFAULT_CONFIG_NAME = "llms.yaml"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_ref_spec(spec: str) -> RefConfig:
    """Parse a ``TITLE=URL`` command-line reference into a RefConfig."""
    title, sep, url = spec.partition("=")
    if not sep or not title.strip() or not url.strip():
        msg = f"Invalid ref '{spec}'; expected TITLE=URL."
        raise ConfigError(msg)
    return RefConfig(title=title.strip(), url=url.strip())


def _build_refs(payload: object | None) -> list[RefConfig]:
    """Build RefConfig entries from the ``refs`` YAML sequence."""
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = "'refs' must be a list of {title, url} mappings."
        raise ConfigError(msg)
    refs: list[RefConfig] = []
    for index, entry in enumerate(payload):
        match entry:
            case {"title": str() as title, "url": str() as url} if url.strip():
                refs.append(RefConfig(title=title.strip(), url=url.strip()))
            case _:
                msg = f"refs[{index}] must define string 'title' and 'url' fields."
                raise ConfigError(msg)
    return refs


def _build_browser_config(payload: typ.Mapping[str, typ.Any] | None) -> BrowserConfig:
    """Build a BrowserConfig from the ``browser`` mapping, keeping defaults."""
    base = BrowserConfig()
    if not payload:
        return base
    if not isinstance(payload, dict):
        msg = "'browser' must be a mapping."
        raise ConfigError(msg)
    try:
        return BrowserConfig(
            headless=bool(payload.get("headless", base.headless)),
            registry_timeout_ms=float(
                payload.get("registry_timeout_ms", base.registry_timeout_ms)
            ),
            content_timeout_ms=float(
                payload.get("content_timeout_ms", base.content_timeout_ms)
            ),
        )
    except (TypeError, ValueError) as exc:
        msg = f"Invalid browser timeout: {exc}"
        raise ConfigError(msg) from exc


__all__ = [
    "DEFAULT_CONFIG_NAME",
    "_build_browser_config",
    "_build_refs",
    "_optional_str",
    "parse_ref_spec",
]
