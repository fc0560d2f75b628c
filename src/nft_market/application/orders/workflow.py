"""Application orders – OrderWorkflow base class and execution record."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, Generic, TypeVar

from nft_market.application.orders.intents import WalletContext
from nft_market.application.orders.locations import locations
from nft_market.application.orders.outcomes import OrderOutcome
from nft_market.application.orders.ports import EthereumProvider, MarketplaceContract, Navigator, OutcomeDispatcher
from nft_market.kernel.errors import ProviderUnavailableError, WalletNotConnectedError, describe
from nft_market.kernel.types import Address
from nft_market.observability.logging import Logger, get_logger

I = TypeVar("I")
R = TypeVar("R")

_log = get_logger(__name__)


class WorkflowState(enum.Enum):
    """Lifecycle states of one workflow invocation."""

    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    """Local precondition checks; no external call issued yet."""

    AWAITING_EXTERNAL_CALL = "AWAITING_EXTERNAL_CALL"
    """At least one call to the repository or the chain is in flight."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


_ALLOWED: dict[WorkflowState, frozenset[WorkflowState]] = {
    WorkflowState.IDLE: frozenset({WorkflowState.VALIDATING}),
    WorkflowState.VALIDATING: frozenset({WorkflowState.AWAITING_EXTERNAL_CALL, WorkflowState.FAILURE}),
    WorkflowState.AWAITING_EXTERNAL_CALL: frozenset({WorkflowState.SUCCESS, WorkflowState.FAILURE}),
    WorkflowState.SUCCESS: frozenset(),
    WorkflowState.FAILURE: frozenset(),
}


class InvalidTransitionError(Exception):
    """Raised when a workflow tries to move to a state it cannot reach."""

    def __init__(self, from_state: WorkflowState, to_state: WorkflowState) -> None:
        super().__init__(f"No transition from '{from_state.value}' to '{to_state.value}'")
        self.from_state = from_state
        self.to_state = to_state


@dataclass
class WorkflowExecution:
    """Runtime record of one invocation: state history and final outcome."""

    workflow: str
    state: WorkflowState = WorkflowState.IDLE
    history: list[WorkflowState] = field(default_factory=lambda: [WorkflowState.IDLE])
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    outcome: OrderOutcome | None = None

    def advance(self, to_state: WorkflowState) -> None:
        if to_state not in _ALLOWED[self.state]:
            raise InvalidTransitionError(self.state, to_state)
        self.state = to_state
        self.history.append(to_state)

    @property
    def finished(self) -> bool:
        return self.state in (WorkflowState.SUCCESS, WorkflowState.FAILURE)


class OrderWorkflow(abc.ABC, Generic[I, R]):
    """One intent-triggered sequence: validate, call out, dispatch, navigate.

    Subclasses implement :meth:`perform` (which must call
    ``execution.advance(WorkflowState.AWAITING_EXTERNAL_CALL)`` before its
    first external await) and the two outcome builders. :meth:`run` owns the
    boundary: any exception raised by :meth:`perform` becomes a failure
    outcome, so nothing from the external calls escapes.

    Dispatch always precedes navigation, and navigation only follows a
    success when :attr:`navigates_on_success` is set.
    """

    name: ClassVar[str]
    navigates_on_success: ClassVar[bool] = False

    def __init__(self, dispatcher: OutcomeDispatcher, navigator: Navigator | None = None) -> None:
        if self.navigates_on_success and navigator is None:
            raise ValueError(f"{type(self).__name__} requires a navigator")
        self._dispatcher = dispatcher
        self._navigator = navigator

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def run(self, intent: I, wallet: WalletContext | None = None) -> WorkflowExecution:
        wallet = wallet or WalletContext()
        execution = WorkflowExecution(workflow=self.name)
        log: Logger = _log.bind(workflow=self.name, intent=getattr(intent, "type", type(intent).__name__))
        log.info("workflow_started")

        execution.advance(WorkflowState.VALIDATING)
        try:
            result = await self.perform(intent, wallet, execution)
        except Exception as exc:  # noqa: BLE001 – boundary converts every error
            reason = describe(exc)
            execution.advance(WorkflowState.FAILURE)
            execution.outcome = self.failure(intent, reason)
            log.warning("workflow_failed", reason=reason, error_type=type(exc).__name__)
            await self._dispatcher.dispatch(execution.outcome)
            return execution

        execution.advance(WorkflowState.SUCCESS)
        execution.outcome = self.success(intent, result)
        log.info("workflow_succeeded")
        await self._dispatcher.dispatch(execution.outcome)
        if self.navigates_on_success and self._navigator is not None:
            await self._navigator.push(locations.activity())
        return execution

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def perform(self, intent: I, wallet: WalletContext, execution: WorkflowExecution) -> R:
        """Validate *intent* and make the external call(s); raise to fail."""

    @abc.abstractmethod
    def success(self, intent: I, result: R) -> OrderOutcome: ...

    @abc.abstractmethod
    def failure(self, intent: I, reason: str) -> OrderOutcome: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class ContractWorkflow(OrderWorkflow[I, str]):
    """Workflow whose external call is a single marketplace contract write."""

    navigates_on_success = True

    def __init__(
        self,
        provider: EthereumProvider,
        dispatcher: OutcomeDispatcher,
        navigator: Navigator,
        *,
        marketplace_address: str,
    ) -> None:
        super().__init__(dispatcher, navigator)
        self._provider = provider
        self._marketplace_address = str(Address(marketplace_address))

    async def connect(
        self, wallet: WalletContext, execution: WorkflowExecution
    ) -> tuple[MarketplaceContract, str]:
        """Return the contract binding and the normalised sender address."""
        if not wallet.is_connected:
            raise WalletNotConnectedError()
        sender = str(Address(wallet.address or ""))
        execution.advance(WorkflowState.AWAITING_EXTERNAL_CALL)
        contract = await self._provider.connect(self._marketplace_address)
        if contract is None:
            raise ProviderUnavailableError()
        return contract, sender


__all__ = [
    "ContractWorkflow",
    "InvalidTransitionError",
    "OrderWorkflow",
    "WorkflowExecution",
    "WorkflowState",
]
