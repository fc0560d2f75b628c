"""Application listings – rows for the on-sale table.

Shapes NFTs and their open orders into flat rows; rendering (images,
gradients, currency formatting) belongs to the presentation layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from nft_market.kernel.marketplace import NFT, Network, NFTCategory, Order, OrderStatus, Rarity

SaleType = Literal["primary", "secondary"]


@dataclass(frozen=True)
class OnSaleItem:
    title: str
    type: NFTCategory
    sale_type: SaleType
    network: Network
    price: int
    subtitle: str | None = None
    rarity: Rarity | None = None
    src: str | None = None


def build_on_sale_items(
    nfts: Iterable[NFT],
    orders: Iterable[Order],
    sale_type: SaleType = "secondary",
) -> list[OnSaleItem]:
    """Pair each NFT with its open order, in NFT order.

    NFTs without an open order are skipped.
    """
    by_nft = {o.nft_id: o for o in orders if o.status is OrderStatus.OPEN}
    items: list[OnSaleItem] = []
    for nft in nfts:
        order = by_nft.get(nft.id)
        if order is None:
            continue
        wearable = nft.wearable if nft.category is NFTCategory.WEARABLE else None
        items.append(
            OnSaleItem(
                title=nft.name or f"#{nft.token_id}",
                subtitle=(wearable.description or None) if wearable else None,
                type=nft.category,
                sale_type=sale_type,
                network=order.network,
                price=order.price,
                rarity=wearable.rarity if wearable else None,
                src=(nft.image or None) if wearable else None,
            )
        )
    return items


__all__ = ["OnSaleItem", "SaleType", "build_on_sale_items"]
