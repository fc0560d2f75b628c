"""Application listings – ListingRepository port."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from nft_market.application.listings.page import Page
from nft_market.application.search import ListingFilters, SearchRequest
from nft_market.kernel.marketplace import NFT, Collection


@runtime_checkable
class ListingRepository(Protocol):
    """Port: read side of the indexing service."""

    async def fetch_collections(self) -> list[Collection]: ...
    async def fetch_listings(
        self, request: SearchRequest, filters: ListingFilters | None = None
    ) -> list[NFT]: ...
    async def count_listings(
        self, request: SearchRequest, filters: ListingFilters | None = None
    ) -> int: ...
    async def fetch_one(self, contract_address: str, token_id: str) -> NFT | None: ...
    async def fetch_page(
        self, request: SearchRequest, filters: ListingFilters | None = None
    ) -> Page[NFT]: ...


__all__ = ["ListingRepository"]
