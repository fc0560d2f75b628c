"""Application orders – OrderOrchestrator."""

from __future__ import annotations

import asyncio
from typing import Any

from nft_market.application.orders.intents import (
    CreateOrderRequest,
    ExecuteOrderRequest,
    FetchOrdersRequest,
    OrderIntent,
    WalletContext,
)
from nft_market.application.orders.ports import EthereumProvider, Navigator, OrderSource, OutcomeDispatcher
from nft_market.application.orders.workflow import OrderWorkflow, WorkflowExecution
from nft_market.application.orders.workflows import (
    CreateOrderWorkflow,
    ExecuteOrderWorkflow,
    FetchOrdersWorkflow,
)


class OrderOrchestrator:
    """Routes order intents to their workflow.

    :meth:`handle` runs one intent to completion. :meth:`submit` schedules
    it as its own task and returns immediately, so any number of intents
    (including identical ones) may be in flight; nothing is de-duplicated
    or serialised here, the contract arbitrates conflicting writes.

    Example::

        orchestrator = OrderOrchestrator(
            orders=repository, provider=provider,
            dispatcher=store, navigator=router,
            marketplace_address=registry.address_of("Marketplace"),
        )
        orchestrator.submit(CreateOrderRequest(nft, "12.5", expires_at), wallet)
        await orchestrator.drain()
    """

    def __init__(
        self,
        orders: OrderSource,
        provider: EthereumProvider,
        dispatcher: OutcomeDispatcher,
        navigator: Navigator,
        *,
        marketplace_address: str,
    ) -> None:
        self._workflows: dict[type, OrderWorkflow[Any, Any]] = {
            FetchOrdersRequest: FetchOrdersWorkflow(orders, dispatcher),
            CreateOrderRequest: CreateOrderWorkflow(
                provider, dispatcher, navigator, marketplace_address=marketplace_address
            ),
            ExecuteOrderRequest: ExecuteOrderWorkflow(
                provider, dispatcher, navigator, marketplace_address=marketplace_address
            ),
        }
        self._pending: set[asyncio.Task[WorkflowExecution]] = set()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def handle(
        self,
        intent: OrderIntent,
        wallet: WalletContext | None = None,
    ) -> WorkflowExecution:
        """Run the workflow for *intent* and return its execution record."""
        return await self.workflow_for(intent).run(intent, wallet)

    def submit(
        self,
        intent: OrderIntent,
        wallet: WalletContext | None = None,
    ) -> asyncio.Task[WorkflowExecution]:
        """Schedule *intent* on the running loop; must be called inside one."""
        workflow = self.workflow_for(intent)
        task = asyncio.get_running_loop().create_task(workflow.run(intent, wallet))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> list[WorkflowExecution]:
        """Wait for every submitted intent still in flight."""
        if not self._pending:
            return []
        return list(await asyncio.gather(*self._pending))

    @property
    def in_flight(self) -> int:
        return len(self._pending)

    def workflow_for(self, intent: OrderIntent) -> OrderWorkflow[Any, Any]:
        try:
            return self._workflows[type(intent)]
        except KeyError:
            raise TypeError(f"No workflow handles {type(intent).__name__}") from None


__all__ = ["OrderOrchestrator"]
