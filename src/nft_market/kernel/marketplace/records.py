"""Marketplace records – NFT, Order, Collection.

Records are immutable snapshots of what the indexing service returned.
Prices are integers in wei; timestamps are epoch milliseconds.
"""
from __future__ import annotations

import dataclasses

from nft_market.kernel.marketplace.enums import (
    BodyShape,
    NFTCategory,
    Network,
    OrderStatus,
    Rarity,
)


@dataclasses.dataclass(frozen=True)
class WearableData:
    """Wearable-only metadata attached to an NFT."""
    category: str
    rarity: Rarity
    body_shapes: tuple[BodyShape, ...] = ()
    description: str = ""


@dataclasses.dataclass(frozen=True)
class NFT:
    id: str
    contract_address: str
    token_id: str
    name: str
    category: NFTCategory
    owner: str
    image: str = ""
    network: Network = Network.ETHEREUM
    active_order_id: str | None = None
    wearable: WearableData | None = None


@dataclasses.dataclass(frozen=True)
class Order:
    """A sale listing for one NFT."""
    id: str
    nft_id: str
    contract_address: str
    token_id: str
    owner: str
    price: int
    expires_at: int
    network: Network = Network.ETHEREUM
    status: OrderStatus = OrderStatus.OPEN

    def is_expired(self, now_millis: int) -> bool:
        return self.expires_at <= now_millis


@dataclasses.dataclass(frozen=True)
class Collection:
    id: str
    name: str
    creator: str = ""
    is_approved: bool = False


__all__ = ["Collection", "NFT", "Order", "WearableData"]
