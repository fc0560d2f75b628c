"""Unit tests – GraphListingRepository over a fake GraphQL client."""
from __future__ import annotations

import asyncio

import pytest

from nft_market.adapters.contracts import ContractRegistry
from nft_market.adapters.graphql import GraphListingRepository
from nft_market.application.listings import ListingRepository
from nft_market.application.orders import merge_options
from nft_market.application.search import MAX_PAGE_SIZE, ListingFilters, ListingQueryCompiler, SearchRequest
from nft_market.kernel.errors import QueryExecutionError
from nft_market.kernel.marketplace import Network
from nft_market.testing import FakeClock, FakeGraphQLClient, graph_nft


def _repository(client: FakeGraphQLClient, network: Network = Network.ETHEREUM) -> GraphListingRepository:
    compiler = ListingQueryCompiler(ContractRegistry.with_defaults(), clock=FakeClock())
    return GraphListingRepository(client, compiler, network)


class TestFetchListings:
    def test_decodes_nfts(self) -> None:
        client = FakeGraphQLClient({"nfts": [graph_nft("1"), graph_nft("2")]})

        nfts = asyncio.run(_repository(client).fetch_listings(SearchRequest(only_on_sale=True)))

        assert [n.token_id for n in nfts] == ["1", "2"]
        [(query, variables)] = client.calls
        assert "searchOrderStatus: open" in query
        assert variables["first"] == 24

    def test_empty_result(self) -> None:
        client = FakeGraphQLClient({"nfts": []})
        assert asyncio.run(_repository(client).fetch_listings(SearchRequest())) == []

    def test_errors_propagate(self) -> None:
        client = FakeGraphQLClient(QueryExecutionError("graph", [{"message": "boom"}]))
        with pytest.raises(QueryExecutionError):
            asyncio.run(_repository(client).fetch_listings(SearchRequest()))
        assert len(client.calls) == 1

    def test_satisfies_port(self) -> None:
        assert isinstance(_repository(FakeGraphQLClient()), ListingRepository)


class TestCountListings:
    def test_counts_returned_ids(self) -> None:
        client = FakeGraphQLClient({"nfts": [{"id": "a"}, {"id": "b"}, {"id": "c"}]})

        total = asyncio.run(_repository(client).count_listings(SearchRequest(search="hat")))

        assert total == 3
        query, _ = client.calls[0]
        assert "...nftFragment" not in query


class TestFetchOne:
    def test_found(self) -> None:
        client = FakeGraphQLClient({"nfts": [graph_nft("9")]})

        nft = asyncio.run(_repository(client).fetch_one("0xF87E31492FAF9A91B02EE0DEAAD50D51D56D5D4D", "9"))

        assert nft is not None
        assert nft.token_id == "9"
        _, variables = client.calls[0]
        assert variables == {
            "contractAddress": "0xf87e31492faf9a91b02ee0deaad50d51d56d5d4d",
            "tokenId": "9",
        }

    def test_absent(self) -> None:
        client = FakeGraphQLClient({"nfts": []})
        assert asyncio.run(_repository(client).fetch_one("0xabc", "1")) is None


class TestFetchPage:
    def test_items_and_total(self) -> None:
        client = FakeGraphQLClient(
            {"nfts": [graph_nft("1")]},
            {"nfts": [{"id": str(i)} for i in range(30)]},
        )
        request = SearchRequest(first=1, skip=2, only_on_sale=True)

        page = asyncio.run(_repository(client).fetch_page(request, ListingFilters(is_wearable_head=True)))

        assert [n.token_id for n in page.items] == ["1"]
        assert page.total == 30
        assert page.first == 1
        assert page.skip == 2
        (_, fetch_vars), (_, count_vars) = client.calls
        assert (fetch_vars["first"], fetch_vars["skip"]) == (1, 2)
        assert (count_vars["first"], count_vars["skip"]) == (MAX_PAGE_SIZE, 0)

    def test_total_is_a_lower_bound_past_the_count_cap(self) -> None:
        capped = {"nfts": [{"id": str(i)} for i in range(MAX_PAGE_SIZE)]}
        client = FakeGraphQLClient({"nfts": [graph_nft("1"), graph_nft("2")]}, capped)
        request = SearchRequest(first=2, skip=1200)

        page = asyncio.run(_repository(client).fetch_page(request))

        assert page.total == 1203
        assert page.has_next

    def test_short_page_past_the_cap_ends_paging(self) -> None:
        capped = {"nfts": [{"id": str(i)} for i in range(MAX_PAGE_SIZE)]}
        client = FakeGraphQLClient({"nfts": [graph_nft("1")]}, capped)

        page = asyncio.run(_repository(client).fetch_page(SearchRequest(first=2, skip=1200)))

        assert page.total == 1201
        assert not page.has_next

    def test_below_cap_total_is_exact(self) -> None:
        client = FakeGraphQLClient({"nfts": [graph_nft("1"), graph_nft("2")]}, {"nfts": [{"id": "a"}] * 5})

        page = asyncio.run(_repository(client).fetch_page(SearchRequest(first=2)))

        assert page.total == 5


class TestFetchCollections:
    def test_decodes(self) -> None:
        client = FakeGraphQLClient({"collections": [{"id": "c1", "name": "Hats"}]})
        [collection] = asyncio.run(_repository(client).fetch_collections())
        assert collection.id == "c1"


class TestFetchOrders:
    def test_splits_orders_and_nfts(self) -> None:
        client = FakeGraphQLClient(
            {"nfts": [graph_nft("1"), graph_nft("2", with_order=False)]}
        )

        orders, nfts = asyncio.run(
            _repository(client, Network.MATIC).fetch_orders(merge_options({"search": "hat"}))
        )

        assert [n.token_id for n in nfts] == ["1", "2"]
        assert [o.token_id for o in orders] == ["1"]
        assert orders[0].network is Network.MATIC
        query, variables = client.calls[0]
        assert 'searchText_contains: "hat"' in query
        assert variables["orderBy"] == "createdAt"
        assert variables["orderDirection"] == "desc"
