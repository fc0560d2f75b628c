"""Application orders – intents that trigger the workflows."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, TypeAlias

from nft_market.application.orders.options import FetchOrderOptions, merge_options
from nft_market.kernel.marketplace import NFT, Order


@dataclasses.dataclass(frozen=True)
class WalletContext:
    """Read-only snapshot of the session's connected wallet."""

    address: str | None = None

    @property
    def is_connected(self) -> bool:
        return bool(self.address)


@dataclasses.dataclass(frozen=True)
class FetchOrdersRequest:
    """Partial fetch options, frozen and merged over the defaults once."""

    type: ClassVar[str] = "[Request] Fetch Orders"

    options: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    effective_options: FetchOrderOptions = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # own a read-only copy so later edits to the caller's dict are not seen
        options = MappingProxyType(dict(self.options))
        object.__setattr__(self, "options", options)
        object.__setattr__(self, "effective_options", merge_options(options))


@dataclasses.dataclass(frozen=True)
class CreateOrderRequest:
    type: ClassVar[str] = "[Request] Create Order"

    nft: NFT
    price: Decimal | int | float | str
    expires_at: int


@dataclasses.dataclass(frozen=True)
class ExecuteOrderRequest:
    type: ClassVar[str] = "[Request] Execute Order"

    order: Order
    nft: NFT
    fingerprint: str | None = None


OrderIntent: TypeAlias = FetchOrdersRequest | CreateOrderRequest | ExecuteOrderRequest

__all__ = [
    "CreateOrderRequest",
    "ExecuteOrderRequest",
    "FetchOrdersRequest",
    "OrderIntent",
    "WalletContext",
]
