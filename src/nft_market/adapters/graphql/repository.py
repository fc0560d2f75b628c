"""GraphQL adapter – GraphListingRepository."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Any

from nft_market.adapters.graphql.client import GraphQLClient
from nft_market.adapters.graphql.decoders import decode_active_order, decode_collection, decode_nft
from nft_market.application.listings import Page
from nft_market.application.orders import FetchOrderOptions
from nft_market.application.search import (
    MAX_PAGE_SIZE,
    CompiledQuery,
    ListingFilters,
    ListingQueryCompiler,
    SearchRequest,
)
from nft_market.application.search.fragments import COLLECTIONS_QUERY, NFT_BY_ADDRESS_AND_ID_QUERY
from nft_market.kernel.marketplace import NFT, Collection, Network, Order
from nft_market.observability.logging import get_logger

_log = get_logger(__name__)


class GraphListingRepository:
    """Translates listing requests into indexing-service queries.

    One query per call, no retry, no cache: errors raised by the client
    reach the caller unchanged.
    """

    def __init__(
        self,
        client: GraphQLClient,
        compiler: ListingQueryCompiler,
        network: Network = Network.ETHEREUM,
    ) -> None:
        self._client = client
        self._compiler = compiler
        self._network = network

    async def fetch_collections(self) -> list[Collection]:
        data = await self._client.query(COLLECTIONS_QUERY)
        return [decode_collection(raw) for raw in data.get("collections") or []]

    async def fetch_listings(
        self, request: SearchRequest, filters: ListingFilters | None = None
    ) -> list[NFT]:
        raw = await self._run(self._compiler.compile(request, filters))
        return [decode_nft(r, self._network) for r in raw]

    async def count_listings(
        self, request: SearchRequest, filters: ListingFilters | None = None
    ) -> int:
        """Number of matches inside the request's ``first``/``skip`` window."""
        raw = await self._run(self._compiler.compile(request, filters, is_count=True))
        return len(raw)

    async def fetch_one(self, contract_address: str, token_id: str) -> NFT | None:
        data = await self._client.query(
            NFT_BY_ADDRESS_AND_ID_QUERY,
            {"contractAddress": contract_address.lower(), "tokenId": str(token_id)},
        )
        nfts = data.get("nfts") or []
        return decode_nft(nfts[0], self._network) if nfts else None

    async def fetch_page(
        self, request: SearchRequest, filters: ListingFilters | None = None
    ) -> Page[NFT]:
        """Fetch one page and the total number of matches concurrently.

        The service returns at most ``MAX_PAGE_SIZE`` ids per query, so
        ``total`` saturates there. Past that point it is raised to cover the
        rows actually seen, plus one while pages keep coming back full, so
        ``has_next`` stays true until a short page arrives.
        """
        count_request = dataclasses.replace(request, first=MAX_PAGE_SIZE, skip=0)
        items, total = await asyncio.gather(
            self.fetch_listings(request, filters),
            self.count_listings(count_request, filters),
        )
        if total >= MAX_PAGE_SIZE:
            seen = request.skip + len(items)
            total = max(total, seen + 1 if len(items) == request.first else seen)
        return Page(items=items, total=total, first=request.first, skip=request.skip)

    async def fetch_orders(self, options: FetchOrderOptions) -> tuple[list[Order], list[NFT]]:
        """Listings for *options* with the open orders embedded in them."""
        raw = await self._run(
            self._compiler.compile(options.to_search_request(), options.to_filters())
        )
        nfts = [decode_nft(r, self._network) for r in raw]
        orders = [o for o in (decode_active_order(r, self._network) for r in raw) if o is not None]
        return orders, nfts

    async def _run(self, compiled: CompiledQuery) -> list[dict[str, Any]]:
        _log.debug("listing_query", where=compiled.where, variables=compiled.variables)
        data = await self._client.query(compiled.query, compiled.variables)
        return list(data.get("nfts") or [])


__all__ = ["GraphListingRepository"]
