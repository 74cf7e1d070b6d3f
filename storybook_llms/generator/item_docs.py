"""Render the per-item ``.txt`` and ``.html`` documentation pages."""

from __future__ import annotations

import typing as typ

from .props import documented_subcomponents, markdown_props_table, prop_rows
from .renderer import HtmlContentRenderer
from .templating import default_environment

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from storybook_llms.models import DocumentableItem, StoryVariant


def prose_content(item: DocumentableItem) -> str:
    """Join the non-empty page bodies of a prose item with blank lines."""
    return "\n\n".join(
        variant.parameters.full_source
        for variant in item.story_variants
        if variant.parameters.full_source
    )


def _example_lines(variant: StoryVariant) -> list[str]:
    lines = [f"### {variant.name}", ""]
    if variant.parameters.description:
        lines += [variant.parameters.description, ""]
    source = variant.example_source
    if source and source.strip():
        lines += ["```tsx", source.strip(), "```", ""]
    return lines


def generate_item_text(item: DocumentableItem) -> str:
    """Return the plain-text documentation page of ``item``.

    Prose pages are emitted as their extracted Markdown. Component pages list
    the description, a props table, documented subcomponents, and one
    example per story variant; empty sections are omitted.
    """
    if item.is_prose_page:
        return prose_content(item)

    lines = [f"# {item.title}", ""]
    if item.description:
        lines += [item.description, ""]

    meta = item.component_meta
    if meta is not None:
        table = markdown_props_table(meta.props_info)
        if table:
            lines += ["## Props", "", *table, ""]

    subcomponents = documented_subcomponents(meta)
    if subcomponents:
        lines += ["## Subcomponents", ""]
        for name, sub, _rows in subcomponents:
            lines += [f"### {name}", ""]
            if sub.description:
                lines += [sub.description, ""]
            table = markdown_props_table(sub.props_info)
            if table:
                lines += ["#### Props", "", *table, ""]

    if item.story_variants:
        lines += ["## Examples", ""]
        for variant in item.story_variants:
            lines += _example_lines(variant)

    return "\n".join(lines).rstrip("\n") + "\n"


def generate_item_html(
    item: DocumentableItem,
    renderer: HtmlContentRenderer | None = None,
    *,
    env: Environment | None = None,
) -> str:
    """Return the HTML documentation page of ``item``.

    Parameters
    ----------
    item : DocumentableItem
        Enriched item to render.
    renderer : HtmlContentRenderer, optional
        Converts prose Markdown into highlighted HTML. A default renderer is
        created when omitted.
    env : Environment, optional
        Jinja environment; defaults to the packaged templates.

    Returns
    -------
    str
        Complete HTML document. Example sources are escaped by Jinja.
    """
    renderer = renderer or HtmlContentRenderer()
    template = (env or default_environment()).get_template("item_page.jinja")
    meta = item.component_meta
    examples = [
        {
            "name": variant.name,
            "description": variant.parameters.description,
            "source": (variant.example_source or "").strip(),
        }
        for variant in item.story_variants
    ]
    return template.render(
        title=item.title,
        is_prose=item.is_prose_page,
        prose_html=renderer.markdown(prose_content(item)) if item.is_prose_page else "",
        code_stylesheet=renderer.stylesheet,
        description=item.description,
        props=prop_rows(meta.props_info) if meta else [],
        subcomponents=documented_subcomponents(meta),
        examples=examples,
    )


__all__ = ["generate_item_html", "generate_item_text", "prose_content"]
