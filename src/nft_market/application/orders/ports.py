"""Application orders – ports to the collaborators the workflows drive."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from nft_market.application.orders.options import FetchOrderOptions
from nft_market.application.orders.outcomes import OrderOutcome
from nft_market.kernel.marketplace import NFT, Order


@runtime_checkable
class OrderSource(Protocol):
    """Port: listings with their backing NFTs, as one paired result."""

    async def fetch_orders(self, options: FetchOrderOptions) -> tuple[list[Order], list[NFT]]: ...


@runtime_checkable
class MarketplaceContract(Protocol):
    """Port: marketplace contract writes.

    Each call submits one transaction from *sender* and returns its hash as
    soon as the node accepts it; mining is not awaited.
    """

    async def create_order(
        self, nft_address: str, token_id: str, price: int, expires_at: int, *, sender: str
    ) -> str: ...

    async def execute_order(
        self, nft_address: str, token_id: str, price: int, *, sender: str
    ) -> str: ...

    async def safe_execute_order(
        self, nft_address: str, token_id: str, price: int, fingerprint: str, *, sender: str
    ) -> str: ...


@runtime_checkable
class EthereumProvider(Protocol):
    """Port: the injected wallet provider.

    Binds the marketplace contract deployed at *marketplace_address*, or
    returns ``None`` when no provider is available.
    """

    async def connect(self, marketplace_address: str) -> MarketplaceContract | None: ...


@runtime_checkable
class OutcomeDispatcher(Protocol):
    """Port: deliver workflow outcomes to state consumers."""

    async def dispatch(self, outcome: OrderOutcome) -> None: ...


@runtime_checkable
class Navigator(Protocol):
    """Port: move the user to another location."""

    async def push(self, location: str) -> None: ...


__all__ = [
    "EthereumProvider",
    "MarketplaceContract",
    "Navigator",
    "OrderSource",
    "OutcomeDispatcher",
]
