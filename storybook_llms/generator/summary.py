"""Render the ``llms.txt`` summary and its HTML counterpart.

Both documents list every documentable item in extraction order, linking to
``<base>/llms/<id>.html`` and quoting the first line of the component
description. Referenced Storybooks are linked to their own ``llms.txt``.
"""

from __future__ import annotations

import typing as typ

from storybook_llms._constants import LLMS_DIRNAME, LLMSTXT_URL

from .templating import default_environment, first_line

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Environment

    from storybook_llms.config import RunConfiguration
    from storybook_llms.models import DocumentableItem

SUMMARY_NOTE = (
    "> **Note:** This is a summary overview using the LLMs.txt format "
    f"({LLMSTXT_URL}). Each section links to its full documentation file in "
    "plain text (.txt) format. Click any link below to view the detailed "
    "documentation for that section."
)


def item_url(config: RunConfiguration, item: DocumentableItem, suffix: str = "html") -> str:
    """Return the published URL of ``item``'s ``.html`` or ``.txt`` page."""
    return f"{config.base_url}/{LLMS_DIRNAME}/{item.id}.{suffix}"


def generate_summary_text(
    config: RunConfiguration, items: cabc.Sequence[DocumentableItem]
) -> str:
    """Return the ``llms.txt`` summary document for ``items``."""
    lines = [f"# {config.summary_title}", "", SUMMARY_NOTE, ""]
    if config.summary_description:
        lines += [config.summary_description, ""]

    for item in items:
        summary = first_line(item.description)
        suffix = f": {summary}" if summary else ""
        lines.append(f"- [{item.title}]({item_url(config, item)}){suffix}")

    if config.refs:
        lines += ["", "## Optional", ""]
        lines += [f"- [{ref.title}]({ref.llms_url})" for ref in config.refs]
    return "\n".join(lines) + "\n"


def generate_summary_html(
    config: RunConfiguration,
    items: cabc.Sequence[DocumentableItem],
    *,
    env: Environment | None = None,
) -> str:
    """Return the styled HTML index of ``items``."""
    template = (env or default_environment()).get_template("summary_index.jinja")
    cards = [
        {
            "title": item.title,
            "href": item_url(config, item),
            "summary": first_line(item.description),
        }
        for item in items
    ]
    return template.render(
        title=config.summary_title,
        description=config.summary_description,
        llmstxt_url=LLMSTXT_URL,
        cards=cards,
        refs=config.refs,
    )


__all__ = ["SUMMARY_NOTE", "generate_summary_html", "generate_summary_text", "item_url"]
