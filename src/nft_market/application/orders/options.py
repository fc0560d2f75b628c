"""Application orders – FetchOrderOptions and their defaults."""
from __future__ import annotations

import dataclasses
from typing import Any, Final, Mapping

from nft_market.application.search import DEFAULT_PAGE_SIZE, ListingFilters, SearchRequest
from nft_market.kernel.errors import ValidationError
from nft_market.kernel.marketplace import Rarity, SortDirection, WearableCategory, WearableGender


@dataclasses.dataclass(frozen=True)
class FetchOrderOptions:
    """Everything the fetch workflow needs, flattened for shallow merging."""

    first: int = DEFAULT_PAGE_SIZE
    skip: int = 0
    order_by: str = "createdAt"
    order_direction: SortDirection = SortDirection.DESC
    only_on_sale: bool = True
    search: str | None = None
    address: str | None = None
    wearable_category: WearableCategory | str | None = None
    is_wearable_head: bool = False
    is_wearable_accessory: bool = False
    wearable_rarities: tuple[Rarity | str, ...] = ()
    wearable_genders: tuple[WearableGender | str, ...] = ()
    contracts: tuple[str, ...] = ()

    def to_search_request(self) -> SearchRequest:
        return SearchRequest(
            first=self.first,
            skip=self.skip,
            order_by=self.order_by,
            order_direction=self.order_direction,
            only_on_sale=self.only_on_sale,
            search=self.search,
            address=self.address,
        )

    def to_filters(self) -> ListingFilters:
        return ListingFilters(
            wearable_category=self.wearable_category,
            is_wearable_head=self.is_wearable_head,
            is_wearable_accessory=self.is_wearable_accessory,
            wearable_rarities=tuple(self.wearable_rarities),
            wearable_genders=tuple(self.wearable_genders),
            contracts=tuple(self.contracts),
        )


DEFAULT_FETCH_ORDER_OPTIONS: Final = FetchOrderOptions()

_OPTION_NAMES: Final = frozenset(f.name for f in dataclasses.fields(FetchOrderOptions))
_SEQUENCE_OPTIONS: Final = frozenset({"wearable_rarities", "wearable_genders", "contracts"})


def check_option_names(partial: Mapping[str, Any]) -> None:
    unknown = sorted(set(partial) - _OPTION_NAMES)
    if unknown:
        raise ValidationError(
            f"Unknown fetch option(s): {', '.join(unknown)}",
            errors=[{"field": name, "error": "unknown"} for name in unknown],
        )


def merge_options(
    partial: Mapping[str, Any] | None = None,
    defaults: FetchOrderOptions = DEFAULT_FETCH_ORDER_OPTIONS,
) -> FetchOrderOptions:
    """Shallow-merge *partial* over *defaults*; caller-supplied keys win."""
    partial = {
        name: tuple(value or ()) if name in _SEQUENCE_OPTIONS else value
        for name, value in (partial or {}).items()
    }
    check_option_names(partial)
    return dataclasses.replace(defaults, **partial)


__all__ = [
    "DEFAULT_FETCH_ORDER_OPTIONS",
    "FetchOrderOptions",
    "check_option_names",
    "merge_options",
]
