"""Render ``llms/sitemap.xml`` for the generated documentation."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from storybook_llms._constants import (
    LLMS_DIRNAME,
    SITEMAP_NAMESPACE,
    SUMMARY_HTML_FILENAME,
    SUMMARY_TEXT_FILENAME,
)

from .summary import item_url
from .templating import default_environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from storybook_llms.config import RunConfiguration
    from storybook_llms.models import DocumentableItem

CHANGE_FREQUENCY = "weekly"


@dc.dataclass(frozen=True, slots=True)
class SitemapEntry:
    """Single ``<url>`` element."""

    loc: str
    priority: str


def sitemap_entries(
    config: RunConfiguration, items: cabc.Sequence[DocumentableItem]
) -> tuple[list[SitemapEntry], list[tuple[SitemapEntry, SitemapEntry]]]:
    """Return the summary entries and one ``(txt, html)`` pair per item."""
    base = config.base_url
    summaries = [
        SitemapEntry(f"{base}/{SUMMARY_TEXT_FILENAME}", "1.0"),
        SitemapEntry(f"{base}/{LLMS_DIRNAME}/{SUMMARY_HTML_FILENAME}", "0.9"),
    ]
    pages = [
        (
            SitemapEntry(item_url(config, item, "txt"), "0.8"),
            SitemapEntry(item_url(config, item, "html"), "0.7"),
        )
        for item in items
    ]
    return summaries, pages


def generate_sitemap(
    config: RunConfiguration,
    items: cabc.Sequence[DocumentableItem],
    *,
    today: dt.date | None = None,
    env: Environment | None = None,
) -> str:
    """Return a sitemaps.org document listing every generated file.

    ``today`` defaults to the current UTC date and is used as ``lastmod``
    for every entry.
    """
    lastmod = (today or dt.datetime.now(dt.UTC).date()).isoformat()
    summaries, pages = sitemap_entries(config, items)
    groups = [
        ("Main summary page", summaries[:1]),
        ("HTML summary index", summaries[1:]),
        *(("Component/Page documentation", list(pair)) for pair in pages),
    ]
    template = (env or default_environment()).get_template("sitemap.jinja")
    return template.render(
        namespace=SITEMAP_NAMESPACE,
        lastmod=lastmod,
        changefreq=CHANGE_FREQUENCY,
        groups=groups,
    )


__all__ = ["SitemapEntry", "generate_sitemap", "sitemap_entries"]
