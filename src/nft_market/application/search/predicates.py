"""Application search – typed where-clause predicates and their renderer.

A predicate is one term of the ``where`` input object the indexing service
accepts. The compiler only builds predicates; :func:`render_where` is the
single place that turns them into GraphQL text.

Rendering rules::

    Equals("owner", Var("address"))                  -> owner: $address
    Contains("searchText", "cool hat")               -> searchText_contains: "cool hat"
    InSet("searchWearableRarity", ("rare", "epic"))  -> searchWearableRarity_in: ["rare", "epic"]
    RangeGreaterThan("expiresAt", Var("now"))        -> expiresAt_gt: $now
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TypeAlias

__all__ = [
    "Contains",
    "EnumValue",
    "Equals",
    "InSet",
    "Predicate",
    "RangeGreaterThan",
    "Var",
    "render_predicate",
    "render_value",
    "render_where",
]


@dataclass(frozen=True)
class Var:
    """Reference to a declared query variable."""
    name: str


@dataclass(frozen=True)
class EnumValue:
    """Bare GraphQL enum literal (rendered unquoted)."""
    name: str


Value: TypeAlias = str | int | bool | Var | EnumValue | tuple["Value", ...]


@dataclass(frozen=True)
class Equals:
    field: str
    value: Value


@dataclass(frozen=True)
class Contains:
    field: str
    value: Value


@dataclass(frozen=True)
class InSet:
    field: str
    values: tuple[Value, ...]


@dataclass(frozen=True)
class RangeGreaterThan:
    field: str
    value: Value


Predicate: TypeAlias = Equals | Contains | InSet | RangeGreaterThan


def render_value(value: Value) -> str:
    # bool first: it is also an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Var):
        return f"${value.name}"
    if isinstance(value, EnumValue):
        return value.name
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, tuple):
        return "[" + ", ".join(render_value(v) for v in value) + "]"
    raise TypeError(f"Cannot render {type(value).__name__} in a where clause")


def render_predicate(predicate: Predicate) -> str:
    match predicate:
        case Equals(field, value):
            return f"{field}: {render_value(value)}"
        case Contains(field, value):
            return f"{field}_contains: {render_value(value)}"
        case InSet(field, values):
            return f"{field}_in: {render_value(tuple(values))}"
        case RangeGreaterThan(field, value):
            return f"{field}_gt: {render_value(value)}"
    raise TypeError(f"Unknown predicate {predicate!r}")


def render_where(predicates: tuple[Predicate, ...], indent: str = "") -> str:
    """Render *predicates* as the body of a ``where`` object, one per line."""
    return "\n".join(f"{indent}{render_predicate(p)}" for p in predicates)
