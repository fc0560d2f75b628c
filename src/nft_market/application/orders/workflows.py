"""Application orders – fetch, create and execute workflows."""

from __future__ import annotations

from nft_market.application.orders.intents import (
    CreateOrderRequest,
    ExecuteOrderRequest,
    FetchOrdersRequest,
    WalletContext,
)
from nft_market.application.orders.options import FetchOrderOptions
from nft_market.application.orders.outcomes import (
    CreateOrderFailure,
    CreateOrderSuccess,
    ExecuteOrderFailure,
    ExecuteOrderSuccess,
    FetchOrdersFailure,
    FetchOrdersSuccess,
    OrderOutcome,
)
from nft_market.application.orders.ports import OrderSource, OutcomeDispatcher
from nft_market.application.orders.workflow import (
    ContractWorkflow,
    OrderWorkflow,
    WorkflowExecution,
    WorkflowState,
)
from nft_market.kernel.errors import OrderMismatchError
from nft_market.kernel.marketplace import NFT, Order
from nft_market.kernel.types import to_wei

_FetchResult = tuple[FetchOrderOptions, list[Order], list[NFT]]


class FetchOrdersWorkflow(OrderWorkflow[FetchOrdersRequest, _FetchResult]):
    """Load open orders and their NFTs for the merged options."""

    name = "fetch_orders"

    def __init__(self, source: OrderSource, dispatcher: OutcomeDispatcher) -> None:
        super().__init__(dispatcher)
        self._source = source

    async def perform(
        self,
        intent: FetchOrdersRequest,
        wallet: WalletContext,
        execution: WorkflowExecution,
    ) -> _FetchResult:
        options = intent.effective_options
        execution.advance(WorkflowState.AWAITING_EXTERNAL_CALL)
        orders, nfts = await self._source.fetch_orders(options)
        return options, orders, nfts

    def success(self, intent: FetchOrdersRequest, result: _FetchResult) -> OrderOutcome:
        options, orders, nfts = result
        return FetchOrdersSuccess(options=options, orders=tuple(orders), nfts=tuple(nfts))

    def failure(self, intent: FetchOrdersRequest, reason: str) -> OrderOutcome:
        # merged once at construction, so this is the value perform() used
        return FetchOrdersFailure(options=intent.effective_options, error=reason)


class CreateOrderWorkflow(ContractWorkflow[CreateOrderRequest]):
    """Put an NFT on sale: one ``create_order`` write, then go to activity."""

    name = "create_order"

    async def perform(
        self,
        intent: CreateOrderRequest,
        wallet: WalletContext,
        execution: WorkflowExecution,
    ) -> str:
        contract, sender = await self.connect(wallet, execution)
        price_in_wei = to_wei(intent.price)
        return await contract.create_order(
            intent.nft.contract_address,
            intent.nft.token_id,
            price_in_wei,
            intent.expires_at,
            sender=sender,
        )

    def success(self, intent: CreateOrderRequest, result: str) -> OrderOutcome:
        return CreateOrderSuccess(
            nft=intent.nft, price=intent.price, expires_at=intent.expires_at, tx_hash=result
        )

    def failure(self, intent: CreateOrderRequest, reason: str) -> OrderOutcome:
        return CreateOrderFailure(
            nft=intent.nft, price=intent.price, expires_at=intent.expires_at, error=reason
        )


class ExecuteOrderWorkflow(ContractWorkflow[ExecuteOrderRequest]):
    """Buy a listed NFT.

    With a fingerprint the write goes through ``safe_execute_order`` so the
    contract rejects it if the NFT changed since the price was quoted.
    """

    name = "execute_order"

    async def perform(
        self,
        intent: ExecuteOrderRequest,
        wallet: WalletContext,
        execution: WorkflowExecution,
    ) -> str:
        order, nft = intent.order, intent.nft
        if order.nft_id != nft.id:
            raise OrderMismatchError(order.nft_id, nft.id)

        contract, sender = await self.connect(wallet, execution)
        if intent.fingerprint:
            return await contract.safe_execute_order(
                nft.contract_address,
                nft.token_id,
                order.price,
                intent.fingerprint,
                sender=sender,
            )
        return await contract.execute_order(
            nft.contract_address,
            nft.token_id,
            order.price,
            sender=sender,
        )

    def success(self, intent: ExecuteOrderRequest, result: str) -> OrderOutcome:
        return ExecuteOrderSuccess(order=intent.order, nft=intent.nft, tx_hash=result)

    def failure(self, intent: ExecuteOrderRequest, reason: str) -> OrderOutcome:
        return ExecuteOrderFailure(order=intent.order, nft=intent.nft, error=reason)


__all__ = [
    "CreateOrderWorkflow",
    "ExecuteOrderWorkflow",
    "FetchOrdersWorkflow",
]
