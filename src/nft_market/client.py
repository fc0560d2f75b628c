"""MarketplaceClient – composition root for one marketplace network."""
from __future__ import annotations

from typing import Any, Sequence

from nft_market.adapters.contracts import ContractName, ContractRegistry
from nft_market.adapters.graphql import GraphListingRepository, GraphQLClient, HttpxGraphQLClient
from nft_market.application.orders import EthereumProvider, Navigator, OrderOrchestrator, OutcomeDispatcher
from nft_market.application.search import ListingQueryCompiler
from nft_market.config import DotenvSettingsLoader, EnvSettingsLoader, MarketSettings, SettingsFactory, SettingsLoader
from nft_market.kernel.time import Clock
from nft_market.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


class MarketplaceClient:
    """Builds the listing repository and the order orchestrator from settings.

    The GraphQL client is created (and closed) here unless one is passed in.

    Example::

        async with MarketplaceClient.from_env(provider, store, router) as market:
            page = await market.repository.fetch_page(SearchRequest(only_on_sale=True))
            market.orchestrator.submit(FetchOrdersRequest({"search": "hat"}))
    """

    def __init__(
        self,
        settings: MarketSettings,
        provider: EthereumProvider,
        dispatcher: OutcomeDispatcher,
        navigator: Navigator,
        *,
        graph_client: GraphQLClient | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings
        self.registry = ContractRegistry.with_defaults(
            {ContractName.MARKETPLACE.value: settings.marketplace_address, **settings.contract_addresses}
        )
        self._owns_client = graph_client is None
        self.graph: GraphQLClient = graph_client or HttpxGraphQLClient(
            settings.graph_url, timeout=settings.request_timeout
        )
        self.repository = GraphListingRepository(
            self.graph,
            ListingQueryCompiler(self.registry, clock),
            network=settings.network_enum,
        )
        self.orchestrator = OrderOrchestrator(
            orders=self.repository,
            provider=provider,
            dispatcher=dispatcher,
            navigator=navigator,
            marketplace_address=self.registry.address_of(ContractName.MARKETPLACE),
        )

    @classmethod
    def from_env(
        cls,
        provider: EthereumProvider,
        dispatcher: OutcomeDispatcher,
        navigator: Navigator,
        *,
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
        configure_logging: bool = True,
    ) -> "MarketplaceClient":
        settings = SettingsFactory.create(
            MarketSettings,
            loaders=loaders if loaders is not None else [DotenvSettingsLoader(), EnvSettingsLoader()],
            overrides=overrides,
        )
        if configure_logging:
            JsonLoggerFactory.configure(settings.log_level, json_output=settings.log_json)
        _log.info("marketplace_client_configured", network=settings.network, graph_url=settings.graph_url)
        return cls(settings, provider, dispatcher, navigator)

    async def __aenter__(self) -> "MarketplaceClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.orchestrator.drain()
        if self._owns_client and isinstance(self.graph, HttpxGraphQLClient):
            await self.graph.aclose()


__all__ = ["MarketplaceClient"]
