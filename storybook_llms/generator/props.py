"""Tabular view of component props shared by the text and HTML pages."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from storybook_llms.prop_types import render_prop_type

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from storybook_llms.models import ComponentMeta, PropInfo

SKIPPED_PROPS = frozenset({"children"})
TABLE_HEADER = "| Name | Type | Required | Default | Description |"
TABLE_DIVIDER = "|------|------|----------|---------|-------------|"


@dc.dataclass(frozen=True, slots=True)
class PropRow:
    """Display-ready row of a props table."""

    name: str
    type: str
    required: bool
    default: str
    description: str

    @property
    def required_label(self) -> str:
        return "Yes" if self.required else "No"


def _flatten(text: str) -> str:
    return text.replace("\r\n", " ").replace("\n", " ")


def prop_rows(props: cabc.Mapping[str, PropInfo]) -> list[PropRow]:
    """Return table rows for ``props`` in declaration order.

    The ``children`` prop is omitted and multi-line descriptions are
    flattened onto one line.
    """
    return [
        PropRow(
            name=name,
            type=render_prop_type(prop.type),
            required=prop.required,
            default=prop.default_value,
            description=_flatten(prop.description),
        )
        for name, prop in props.items()
        if name not in SKIPPED_PROPS
    ]


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def markdown_props_table(props: cabc.Mapping[str, PropInfo]) -> list[str]:
    """Return the Markdown table lines for ``props``; empty when nothing to show.

    >>> from storybook_llms.models import PropInfo
    >>> markdown_props_table({"children": PropInfo(name="children")})
    []
    """
    rows = prop_rows(props)
    if not rows:
        return []
    lines = [TABLE_HEADER, TABLE_DIVIDER]
    for row in rows:
        cells = (
            f"`{row.name}`",
            f"`{_cell(row.type)}`" if row.type else "",
            row.required_label,
            _cell(row.default),
            _cell(row.description),
        )
        lines.append(f"| {' | '.join(cells)} |")
    return lines


def documented_subcomponents(
    meta: ComponentMeta | None,
) -> list[tuple[str, ComponentMeta, list[PropRow]]]:
    """Return ``(name, meta, rows)`` for each subcomponent carrying docgen data."""
    if meta is None:
        return []
    return [
        (name, sub, prop_rows(sub.props_info)) for name, sub in meta.subcomponents.items()
    ]


__all__ = [
    "SKIPPED_PROPS",
    "PropRow",
    "documented_subcomponents",
    "markdown_props_table",
    "prop_rows",
]
