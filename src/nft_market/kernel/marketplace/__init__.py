"""Kernel marketplace – records and enumerations."""
from nft_market.kernel.marketplace.enums import (
    BodyShape,
    NFTCategory,
    Network,
    OrderStatus,
    Rarity,
    SortDirection,
    WearableCategory,
    WearableGender,
)
from nft_market.kernel.marketplace.records import NFT, Collection, Order, WearableData

__all__ = [
    "BodyShape",
    "Collection",
    "NFT",
    "NFTCategory",
    "Network",
    "Order",
    "OrderStatus",
    "Rarity",
    "SortDirection",
    "WearableCategory",
    "WearableData",
    "WearableGender",
]
