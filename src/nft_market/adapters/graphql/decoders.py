"""GraphQL adapter – decode indexing-service records into kernel records."""
from __future__ import annotations

from typing import Any

from nft_market.kernel.errors import SerializationError
from nft_market.kernel.marketplace import (
    NFT,
    BodyShape,
    Collection,
    Network,
    NFTCategory,
    Order,
    OrderStatus,
    Rarity,
    WearableData,
)


def decode_nft(raw: dict[str, Any], network: Network = Network.ETHEREUM) -> NFT:
    try:
        wearable = raw.get("wearable")
        active = raw.get("activeOrder")
        return NFT(
            id=raw["id"],
            contract_address=raw["contractAddress"].lower(),
            token_id=str(raw["tokenId"]),
            name=raw.get("name") or "",
            category=NFTCategory(raw["category"]),
            owner=(raw.get("owner") or {}).get("address", "").lower(),
            image=raw.get("image") or "",
            network=network,
            active_order_id=active["id"] if active else None,
            wearable=_decode_wearable(wearable) if wearable else None,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed NFT record: {exc}", payload_type="NFT") from exc


def _decode_wearable(raw: dict[str, Any]) -> WearableData:
    return WearableData(
        category=raw["category"],
        rarity=Rarity(raw["rarity"]),
        body_shapes=tuple(BodyShape(s) for s in raw.get("bodyShapes") or ()),
        description=raw.get("description") or "",
    )


def decode_active_order(raw: dict[str, Any], network: Network = Network.ETHEREUM) -> Order | None:
    """Return the NFT record's embedded active order, if it has one."""
    active = raw.get("activeOrder")
    if not active:
        return None
    try:
        return Order(
            id=active["id"],
            nft_id=raw["id"],
            contract_address=raw["contractAddress"].lower(),
            token_id=str(raw["tokenId"]),
            owner=str(active.get("owner", "")).lower(),
            price=int(active["price"]),
            expires_at=int(active["expiresAt"]),
            network=network,
            status=OrderStatus(active.get("status", OrderStatus.OPEN.value)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SerializationError(f"Malformed order record: {exc}", payload_type="Order") from exc


def decode_collection(raw: dict[str, Any]) -> Collection:
    try:
        return Collection(
            id=raw["id"],
            name=raw.get("name") or "",
            creator=str(raw.get("creator") or "").lower(),
            is_approved=bool(raw.get("isApproved", False)),
        )
    except (KeyError, TypeError) as exc:
        raise SerializationError(
            f"Malformed collection record: {exc}", payload_type="Collection"
        ) from exc


__all__ = ["decode_active_order", "decode_collection", "decode_nft"]
