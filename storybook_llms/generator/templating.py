"""Jinja environment shared by the HTML and XML generators."""

from __future__ import annotations

import functools
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def first_line(text: str | None) -> str:
    """Return the first line of ``text`` without surrounding whitespace.

    >>> first_line("Buttons trigger actions.\\nMore detail.")
    'Buttons trigger actions.'
    """
    if not text:
        return ""
    return text.split("\n", 1)[0].strip()


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment loading templates from ``templates_dir``.

    Autoescaping is always on; trusted HTML fragments (rendered Markdown) are
    marked with ``|safe`` inside the templates.
    """
    env = Environment(
        loader=FileSystemLoader(templates_dir or TEMPLATES_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["first_line"] = first_line
    return env


@functools.cache
def default_environment() -> Environment:
    """Return the cached environment for the packaged templates."""
    return build_environment()


__all__ = ["TEMPLATES_DIR", "build_environment", "default_environment", "first_line"]
