"""Application orders – outcome events dispatched by the workflows.

Every workflow invocation produces exactly one of these. Failures carry
the original intent parameters plus a reason that can be shown as-is.
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import ClassVar

from nft_market.application.orders.options import FetchOrderOptions
from nft_market.kernel.marketplace import NFT, Order


@dataclasses.dataclass(frozen=True)
class OrderOutcome:
    type: ClassVar[str] = ""
    succeeded: ClassVar[bool] = False


@dataclasses.dataclass(frozen=True)
class FetchOrdersSuccess(OrderOutcome):
    type: ClassVar[str] = "[Success] Fetch Orders"
    succeeded: ClassVar[bool] = True

    options: FetchOrderOptions
    orders: tuple[Order, ...]
    nfts: tuple[NFT, ...]


@dataclasses.dataclass(frozen=True)
class FetchOrdersFailure(OrderOutcome):
    type: ClassVar[str] = "[Failure] Fetch Orders"

    options: FetchOrderOptions
    error: str


@dataclasses.dataclass(frozen=True)
class CreateOrderSuccess(OrderOutcome):
    type: ClassVar[str] = "[Success] Create Order"
    succeeded: ClassVar[bool] = True

    nft: NFT
    price: Decimal | int | float | str
    expires_at: int
    tx_hash: str


@dataclasses.dataclass(frozen=True)
class CreateOrderFailure(OrderOutcome):
    type: ClassVar[str] = "[Failure] Create Order"

    nft: NFT
    price: Decimal | int | float | str
    expires_at: int
    error: str


@dataclasses.dataclass(frozen=True)
class ExecuteOrderSuccess(OrderOutcome):
    type: ClassVar[str] = "[Success] Execute Order"
    succeeded: ClassVar[bool] = True

    order: Order
    nft: NFT
    tx_hash: str


@dataclasses.dataclass(frozen=True)
class ExecuteOrderFailure(OrderOutcome):
    type: ClassVar[str] = "[Failure] Execute Order"

    order: Order
    nft: NFT
    error: str


__all__ = [
    "CreateOrderFailure",
    "CreateOrderSuccess",
    "ExecuteOrderFailure",
    "ExecuteOrderSuccess",
    "FetchOrdersFailure",
    "FetchOrdersSuccess",
    "OrderOutcome",
]
