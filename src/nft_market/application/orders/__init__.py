"""Application orders – intent-driven order workflows."""
from nft_market.application.orders.intents import (
    CreateOrderRequest,
    ExecuteOrderRequest,
    FetchOrdersRequest,
    OrderIntent,
    WalletContext,
)
from nft_market.application.orders.locations import locations
from nft_market.application.orders.options import (
    DEFAULT_FETCH_ORDER_OPTIONS,
    FetchOrderOptions,
    merge_options,
)
from nft_market.application.orders.orchestrator import OrderOrchestrator
from nft_market.application.orders.outcomes import (
    CreateOrderFailure,
    CreateOrderSuccess,
    ExecuteOrderFailure,
    ExecuteOrderSuccess,
    FetchOrdersFailure,
    FetchOrdersSuccess,
    OrderOutcome,
)
from nft_market.application.orders.ports import (
    EthereumProvider,
    MarketplaceContract,
    Navigator,
    OrderSource,
    OutcomeDispatcher,
)
from nft_market.application.orders.workflow import (
    ContractWorkflow,
    InvalidTransitionError,
    OrderWorkflow,
    WorkflowExecution,
    WorkflowState,
)
from nft_market.application.orders.workflows import (
    CreateOrderWorkflow,
    ExecuteOrderWorkflow,
    FetchOrdersWorkflow,
)

__all__ = [
    "ContractWorkflow",
    "CreateOrderFailure",
    "CreateOrderRequest",
    "CreateOrderSuccess",
    "CreateOrderWorkflow",
    "DEFAULT_FETCH_ORDER_OPTIONS",
    "EthereumProvider",
    "ExecuteOrderFailure",
    "ExecuteOrderRequest",
    "ExecuteOrderSuccess",
    "ExecuteOrderWorkflow",
    "FetchOrderOptions",
    "FetchOrdersFailure",
    "FetchOrdersRequest",
    "FetchOrdersSuccess",
    "FetchOrdersWorkflow",
    "InvalidTransitionError",
    "MarketplaceContract",
    "Navigator",
    "OrderIntent",
    "OrderOrchestrator",
    "OrderOutcome",
    "OrderSource",
    "OrderWorkflow",
    "OutcomeDispatcher",
    "WalletContext",
    "WorkflowExecution",
    "WorkflowState",
    "locations",
    "merge_options",
]
