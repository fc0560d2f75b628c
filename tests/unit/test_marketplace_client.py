"""Unit tests for the MarketplaceClient composition root."""

from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from nft_market.application.orders import CreateOrderRequest, FetchOrdersRequest, FetchOrdersSuccess, WalletContext
from nft_market.application.search import SearchRequest
from nft_market.client import MarketplaceClient
from nft_market.config import MarketSettings, MissingRequiredSettingError
from nft_market.kernel.marketplace import Network
from nft_market.testing import (
    FakeEthereumProvider,
    FakeGraphQLClient,
    FakeMarketplaceContract,
    RecordingDispatcher,
    RecordingNavigator,
    graph_nft,
    nft_builder,
)

_GRAPH = "https://graph.test/subgraphs/name/marketplace"
_MARKET = "0x8e5660b4ab70168b5a6feea0e0315cb49c8cd539"
_HATS = "0x00000000000000000000000000000000000000aa"


def _settings(**overrides) -> MarketSettings:
    fields = {"graph_url": _GRAPH, "marketplace_address": _MARKET, **overrides}
    return MarketSettings(**fields)


class TestComposition:
    def test_registry_includes_configured_contracts(self) -> None:
        market = MarketplaceClient(
            _settings(contract_addresses={"Hats": _HATS}),
            FakeEthereumProvider(),
            RecordingDispatcher(),
            RecordingNavigator(),
            graph_client=FakeGraphQLClient(),
        )
        assert market.registry.address_of("Hats") == _HATS
        assert market.registry.address_of("Marketplace") == _MARKET

    def test_fetch_orders_through_orchestrator(self) -> None:
        dispatcher = RecordingDispatcher()
        graph = FakeGraphQLClient({"nfts": [graph_nft("1")]})
        market = MarketplaceClient(
            _settings(network="MATIC"),
            FakeEthereumProvider(),
            dispatcher,
            RecordingNavigator(),
            graph_client=graph,
        )

        async def run() -> None:
            async with market:
                market.orchestrator.submit(FetchOrdersRequest({"contracts": ["Marketplace"]}))

        asyncio.run(run())

        [outcome] = dispatcher.outcomes
        assert isinstance(outcome, FetchOrdersSuccess)
        assert outcome.orders[0].network is Network.MATIC
        query, _ = graph.calls[0]
        assert f'contractAddress_in: ["{_MARKET}"]' in query

    def test_configured_marketplace_reaches_provider(self) -> None:
        provider = FakeEthereumProvider(FakeMarketplaceContract())
        market = MarketplaceClient(
            _settings(marketplace_address=_HATS),
            provider,
            RecordingDispatcher(),
            RecordingNavigator(),
            graph_client=FakeGraphQLClient(),
        )
        wallet = WalletContext("0x2222222222222222222222222222222222222222")

        asyncio.run(market.orchestrator.handle(CreateOrderRequest(nft_builder(), "1", 0), wallet))

        assert provider.connected_to == [_HATS]

    @respx.mock
    def test_owned_http_client(self) -> None:
        respx.post(_GRAPH).mock(
            return_value=httpx.Response(200, json={"data": {"nfts": [graph_nft("4")]}})
        )

        async def run():
            async with MarketplaceClient(
                _settings(), FakeEthereumProvider(), RecordingDispatcher(), RecordingNavigator()
            ) as market:
                return await market.repository.fetch_listings(SearchRequest())

        [nft] = asyncio.run(run())
        assert nft.token_id == "4"


class TestFromEnv:
    def test_overrides(self) -> None:
        market = MarketplaceClient.from_env(
            FakeEthereumProvider(),
            RecordingDispatcher(),
            RecordingNavigator(),
            loaders=[],
            overrides={"graph_url": _GRAPH, "marketplace_address": _MARKET},
            configure_logging=False,
        )
        assert market.settings.graph_url == _GRAPH
        asyncio.run(market.__aexit__(None, None, None))

    def test_missing_settings(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            MarketplaceClient.from_env(
                FakeEthereumProvider(),
                RecordingDispatcher(),
                RecordingNavigator(),
                loaders=[],
                configure_logging=False,
            )
