"""Application search – ListingQueryCompiler.

Compiles a :class:`SearchRequest` plus :class:`ListingFilters` into the
``nfts`` query understood by the indexing service.

Filters that map onto scalar inputs travel as variables; free text and the
list-valued filters are embedded as literals in the ``where`` object. The
variable header is fixed, so the variables mapping always carries exactly
the declared names (unused ones are ``None``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Iterator, Protocol

from nft_market.application.search.fragments import NFT_FRAGMENT
from nft_market.application.search.predicates import (
    Contains,
    EnumValue,
    Equals,
    InSet,
    Predicate,
    RangeGreaterThan,
    Var,
    render_where,
)
from nft_market.application.search.request import ListingFilters, SearchRequest
from nft_market.kernel.marketplace import BodyShape, OrderStatus, WearableGender
from nft_market.kernel.time import Clock, SystemClock

__all__ = [
    "AddressResolver",
    "CompiledQuery",
    "ListingQueryCompiler",
    "QUERY_VARIABLES",
    "body_shape_predicate",
]

# name -> GraphQL type, in declaration order
QUERY_VARIABLES: tuple[tuple[str, str], ...] = (
    ("first", "Int"),
    ("skip", "Int"),
    ("orderBy", "String"),
    ("orderDirection", "String"),
    ("expiresAt", "String"),
    ("address", "String"),
    ("wearableCategory", "String"),
    ("isWearableHead", "Boolean"),
    ("isWearableAccessory", "Boolean"),
)

_BODY_SHAPES = "searchWearableBodyShapes"


class AddressResolver(Protocol):
    """Port: resolve a contract name to its deployed address."""

    def address_of(self, name: str) -> str: ...


@dataclass(frozen=True)
class CompiledQuery:
    """A ready-to-send query: template text plus its variables."""

    query: str
    variables: dict[str, Any] = field(default_factory=dict)
    predicates: tuple[Predicate, ...] = ()

    @property
    def where(self) -> str:
        """The rendered predicate block on its own."""
        return render_where(self.predicates)


def _text(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def body_shape_predicate(genders: Iterable[WearableGender | str]) -> Predicate | None:
    """Collapse a gender selection into one of the three body-shape filters.

    The service treats "contains both shapes" differently from "equals one
    shape", so the both-genders case is not an ``_in`` filter.
    """
    selected = {WearableGender(g) for g in genders}
    has_male = WearableGender.MALE in selected
    has_female = WearableGender.FEMALE in selected
    if has_male and not has_female:
        return Equals(_BODY_SHAPES, (EnumValue(BodyShape.MALE.value),))
    if has_female and not has_male:
        return Equals(_BODY_SHAPES, (EnumValue(BodyShape.FEMALE.value),))
    if has_male and has_female:
        return Contains(
            _BODY_SHAPES,
            (EnumValue(BodyShape.MALE.value), EnumValue(BodyShape.FEMALE.value)),
        )
    return None


class ListingQueryCompiler:
    """Builds the listing query for a request.

    Example::

        compiler = ListingQueryCompiler(registry, clock=SystemClock())
        compiled = compiler.compile(SearchRequest(only_on_sale=True, search="hat"))
        data = await client.query(compiled.query, compiled.variables)
    """

    def __init__(self, resolver: AddressResolver, clock: Clock | None = None) -> None:
        self._resolver = resolver
        self._clock: Clock = clock or SystemClock()

    def compile(
        self,
        request: SearchRequest,
        filters: ListingFilters | None = None,
        *,
        is_count: bool = False,
    ) -> CompiledQuery:
        filters = filters or ListingFilters()
        # read once so every predicate compares against the same instant
        expires_at = str(self._clock.millis())
        predicates = tuple(self._predicates(request, filters))
        return CompiledQuery(
            query=self._render(predicates, is_count),
            variables=self._variables(request, filters, expires_at),
            predicates=predicates,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _predicates(self, request: SearchRequest, filters: ListingFilters) -> Iterator[Predicate]:
        if request.address:
            yield Equals("owner", Var("address"))

        if request.only_on_sale:
            yield Equals("searchOrderStatus", EnumValue(OrderStatus.OPEN.value))
            yield RangeGreaterThan("searchOrderExpiresAt", Var("expiresAt"))

        if request.search:
            text = request.search.strip().lower()
            if text:
                yield Contains("searchText", text)

        if filters.wearable_category:
            yield Equals("searchWearableCategory", Var("wearableCategory"))

        if filters.is_wearable_head:
            yield Equals("searchIsWearableHead", Var("isWearableHead"))

        if filters.is_wearable_accessory:
            yield Equals("searchIsWearableAccessory", Var("isWearableAccessory"))

        if filters.wearable_rarities:
            yield InSet(
                "searchWearableRarity",
                tuple(_text(r) for r in filters.wearable_rarities),
            )

        if filters.wearable_genders:
            shapes = body_shape_predicate(filters.wearable_genders)
            if shapes is not None:
                yield shapes

        if filters.contracts:
            yield InSet(
                "contractAddress",
                tuple(self._resolver.address_of(name) for name in filters.contracts),
            )

    @staticmethod
    def _variables(
        request: SearchRequest,
        filters: ListingFilters,
        expires_at: str,
    ) -> dict[str, Any]:
        return {
            "first": request.first,
            "skip": request.skip,
            "orderBy": request.order_by,
            "orderDirection": _text(request.order_direction) if request.order_direction else None,
            "expiresAt": expires_at,
            "address": request.address.lower() if request.address else None,
            "wearableCategory": _text(filters.wearable_category) if filters.wearable_category else None,
            "isWearableHead": filters.is_wearable_head,
            "isWearableAccessory": filters.is_wearable_accessory,
        }

    @staticmethod
    def _render(predicates: tuple[Predicate, ...], is_count: bool) -> str:
        header = "\n".join(f"  ${name}: {kind}" for name, kind in QUERY_VARIABLES)
        where = render_where(predicates, indent="      ")
        where_block = f"    where: {{\n{where}\n    }}" if predicates else "    where: {}"
        selection = "id" if is_count else "...nftFragment"
        lines = [
            f"query NFTs(\n{header}\n) {{",
            "  nfts(",
            where_block,
            "    first: $first",
            "    skip: $skip",
            "    orderBy: $orderBy",
            "    orderDirection: $orderDirection",
            "  ) {",
            f"    {selection}",
            "  }",
            "}",
        ]
        if not is_count:
            lines.append(NFT_FRAGMENT)
        return "\n".join(lines)
