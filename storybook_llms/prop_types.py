"""Typed view over the docgen prop type descriptors Storybook exposes.

react-docgen and react-docgen-typescript describe prop types as loosely
shaped nested mappings (``{"name": "enum", "value": [...]}``). This module
parses those payloads into a closed set of dataclasses and renders them into
the short strings used in the props tables.

Examples
--------
>>> render_prop_type(parse_prop_type({"name": "enum", "value": [{"value": "a"}, {"value": "b"}]}))
'a b'
>>> render_prop_type(parse_prop_type({"name": "array", "value": {"name": "string"}}))
'string[]'
>>> render_prop_type(parse_prop_type(None))
''
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec.json as msgspec_json


@dc.dataclass(frozen=True, slots=True)
class PlainType:
    """Type already expressed as a string (``"boolean"``, ``"() => void"``)."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class EnumType:
    """Enumerated literal values."""

    values: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class UnionType:
    """Union of member types, rendered like an enum."""

    values: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class ArrayType:
    """Homogeneous array of ``element``."""

    element: PropType


@dc.dataclass(frozen=True, slots=True)
class FunctionSignatureType:
    """Callable signature; the details are not rendered."""


@dc.dataclass(frozen=True, slots=True)
class NamedType:
    """Any other descriptor that carries a ``name``."""

    name: str


@dc.dataclass(frozen=True, slots=True)
class RawType:
    """Unrecognised payload kept verbatim and rendered as JSON."""

    value: typ.Any


@dc.dataclass(frozen=True, slots=True)
class MissingType:
    """No type information was recorded for the prop."""


PropType = (
    PlainType
    | EnumType
    | UnionType
    | ArrayType
    | FunctionSignatureType
    | NamedType
    | RawType
    | MissingType
)


def encode_literal(value: object) -> str:
    """Return ``value`` as compact JSON, e.g. ``true`` or ``0``."""
    return msgspec_json.encode(value).decode("utf-8")


def _literal_values(raw: object) -> tuple[str, ...]:
    """Return the ``value`` of each enum/union member as display strings."""
    values: list[str] = []
    for member in typ.cast("list[object]", raw):
        literal = member.get("value") if isinstance(member, dict) else member
        values.append(literal if isinstance(literal, str) else encode_literal(literal))
    return tuple(values)


def parse_prop_type(raw: object) -> PropType:
    """Build a :data:`PropType` from a docgen type payload.

    Parameters
    ----------
    raw : object
        The ``type`` entry of a docgen prop: a string, a mapping with a
        ``name`` (and optional ``value``), or ``None``/empty when missing.

    Returns
    -------
    PropType
        The matching variant; unrecognised shapes become :class:`RawType`.
    """
    match raw:
        case None | "":
            return MissingType()
        case dict() as mapping if not mapping:
            return MissingType()
        case str() as text:
            return PlainType(text)
        case {"name": "enum", "value": list() as members}:
            return EnumType(_literal_values(members))
        case {"name": "union", "value": list() as members}:
            return UnionType(_literal_values(members))
        case {"name": "array", "value": element} if element:
            return ArrayType(parse_prop_type(element))
        case {"name": "signature", "value": [{"value": "function"}, *_]}:
            return FunctionSignatureType()
        case {"name": str() as name}:
            return NamedType(name)
        case _:
            return RawType(raw)


def render_prop_type(prop_type: PropType) -> str:
    """Render a parsed prop type into its table representation."""
    match prop_type:
        case PlainType(text=text):
            return text
        case EnumType(values=values) | UnionType(values=values):
            return " ".join(values)
        case ArrayType(element=element):
            return f"{render_prop_type(element)}[]"
        case FunctionSignatureType():
            return "function"
        case NamedType(name=name):
            return name
        case RawType(value=value):
            return encode_literal(value)
        case _:
            return ""


__all__ = [
    "ArrayType",
    "EnumType",
    "FunctionSignatureType",
    "MissingType",
    "NamedType",
    "PlainType",
    "PropType",
    "RawType",
    "UnionType",
    "encode_literal",
    "parse_prop_type",
    "render_prop_type",
]
