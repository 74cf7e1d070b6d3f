"""Immutable records describing the documentable items of a Storybook build.

The metadata extractor builds these records once per run from the data
marshalled out of the preview iframe. Enrichment (filling prose page content)
produces new records with :func:`dataclasses.replace`; the generators only
read them.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import PROSE_PAGE_SUFFIXES
from .prop_types import MissingType, PropType, encode_literal, parse_prop_type


@dc.dataclass(frozen=True, slots=True)
class PropInfo:
    """Single documented prop of a component.

    Attributes
    ----------
    name : str
        Prop name as declared on the component.
    type : PropType
        Parsed docgen type descriptor.
    description : str
        Free-text prop description; may contain newlines.
    default_value : str
        Default value rendered as a string, empty when none is declared.
    required : bool
        Whether the prop must be supplied.
    """

    name: str
    type: PropType = dc.field(default_factory=MissingType)
    description: str = ""
    default_value: str = ""
    required: bool = False


@dc.dataclass(frozen=True, slots=True)
class ComponentMeta:
    """Docgen-derived description of a component and its subcomponents."""

    description: str = ""
    props_info: dict[str, PropInfo] = dc.field(default_factory=dict)
    subcomponents: dict[str, ComponentMeta] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class StoryParameters:
    """Subset of story parameters the generators consume.

    Attributes
    ----------
    docs_only : bool
        ``True`` for prose pages that have no rendered story.
    full_source : str or None
        Markdown body of a prose page; ``None`` until enrichment runs.
    description : str
        Per-story docs description.
    source_code : str
        Example source captured by Storybook (``docs.source.originalSource``).
    """

    docs_only: bool = False
    full_source: str | None = None
    description: str = ""
    source_code: str = ""


@dc.dataclass(frozen=True, slots=True)
class StoryVariant:
    """One story of a component, or the synthetic variant of a prose page."""

    id: str
    name: str
    parameters: StoryParameters = dc.field(default_factory=StoryParameters)

    @property
    def example_source(self) -> str | None:
        """Return the source shown under Examples, preferring prose content."""
        if self.parameters.full_source is not None:
            return self.parameters.full_source
        return self.parameters.source_code or None


@dc.dataclass(frozen=True, slots=True)
class DocumentableItem:
    """A component or prose page rendered into one pair of output files."""

    id: str
    title: str
    file_name: str = ""
    component_meta: ComponentMeta | None = None
    story_variants: tuple[StoryVariant, ...] = ()

    @property
    def is_prose_page(self) -> bool:
        """Return ``True`` when there are variants and every one is docs-only."""
        return bool(self.story_variants) and all(
            variant.parameters.docs_only for variant in self.story_variants
        )

    @property
    def description(self) -> str:
        """Return the component description, or an empty string."""
        return self.component_meta.description if self.component_meta else ""


def is_prose_file(file_name: str) -> bool:
    """Return ``True`` when ``file_name`` is a prose-page source file."""
    return file_name.endswith(PROSE_PAGE_SUFFIXES)


def _default_value(raw: object) -> str:
    match raw:
        case str():
            return raw
        case {"value": str() as value}:
            return value
        case {"value": value} if value is not None:
            return encode_literal(value)
        case _:
            return ""


def build_props(docgen_props: typ.Mapping[str, typ.Any] | None) -> dict[str, PropInfo]:
    """Convert a docgen ``props`` mapping into :class:`PropInfo` records."""
    props: dict[str, PropInfo] = {}
    for name, payload in (docgen_props or {}).items():
        arg = payload if isinstance(payload, dict) else {}
        props[name] = PropInfo(
            name=name,
            type=parse_prop_type(arg.get("type")),
            description=arg.get("description") or "",
            default_value=_default_value(arg.get("defaultValue")),
            required=bool(arg.get("required", False)),
        )
    return props


def build_component_meta(
    description: str,
    docgen: typ.Mapping[str, typ.Any] | None,
    subcomponents: typ.Mapping[str, typ.Any] | None,
) -> ComponentMeta | None:
    """Assemble :class:`ComponentMeta` from marshalled docgen payloads.

    Subcomponents without docgen information are dropped. Returns ``None``
    when there is nothing to document.
    """
    subs: dict[str, ComponentMeta] = {}
    for name, sub_docgen in (subcomponents or {}).items():
        if not isinstance(sub_docgen, dict):
            continue
        subs[name] = ComponentMeta(
            description=sub_docgen.get("description") or "",
            props_info=build_props(sub_docgen.get("props")),
        )
    props = build_props(docgen.get("props")) if docgen else {}
    if not (description or props or subs):
        return None
    return ComponentMeta(description=description, props_info=props, subcomponents=subs)


__all__ = [
    "ComponentMeta",
    "DocumentableItem",
    "PropInfo",
    "StoryParameters",
    "StoryVariant",
    "build_component_meta",
    "build_props",
    "is_prose_file",
]
