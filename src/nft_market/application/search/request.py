"""Application search – SearchRequest and ListingFilters value objects."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from nft_market.kernel.marketplace import Rarity, SortDirection, WearableCategory, WearableGender

__all__ = ["DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "ListingFilters", "SearchRequest"]

DEFAULT_PAGE_SIZE: Final = 24
# graph-node refuses ``first`` above this
MAX_PAGE_SIZE: Final = 1000


@dataclass(frozen=True)
class SearchRequest:
    """Pagination, ordering and the generic listing filters.

    Every field except pagination is optional; an unset field contributes
    nothing to the compiled query.
    """
    first: int = DEFAULT_PAGE_SIZE
    skip: int = 0
    order_by: str | None = None
    order_direction: SortDirection | None = None
    only_on_sale: bool = False
    search: str | None = None
    address: str | None = None

    def __post_init__(self) -> None:
        if self.first < 0 or self.first > MAX_PAGE_SIZE:
            raise ValueError(f"first must be between 0 and {MAX_PAGE_SIZE}")
        if self.skip < 0:
            raise ValueError("skip must be >= 0")


@dataclass(frozen=True)
class ListingFilters:
    """Category-specific filters (wearables and contract allow-list)."""
    wearable_category: WearableCategory | str | None = None
    is_wearable_head: bool = False
    is_wearable_accessory: bool = False
    wearable_rarities: tuple[Rarity | str, ...] = ()
    wearable_genders: tuple[WearableGender | str, ...] = ()
    contracts: tuple[str, ...] = ()
