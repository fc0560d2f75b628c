"""Testing fakes – RecordingDispatcher, RecordingNavigator.

Both can share one :class:`SideEffectLog` so tests can assert the relative
order of dispatches and navigations.
"""
from __future__ import annotations

from typing import Any

from nft_market.application.orders import OrderOutcome


class SideEffectLog:
    def __init__(self) -> None:
        self.entries: list[tuple[str, Any]] = []

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.entries]


class RecordingDispatcher:
    def __init__(self, log: SideEffectLog | None = None) -> None:
        self.log = log or SideEffectLog()
        self.outcomes: list[OrderOutcome] = []

    async def dispatch(self, outcome: OrderOutcome) -> None:
        self.outcomes.append(outcome)
        self.log.entries.append(("dispatch", outcome))

    def of_type(self, type_: str) -> list[OrderOutcome]:
        return [o for o in self.outcomes if o.type == type_]


class RecordingNavigator:
    def __init__(self, log: SideEffectLog | None = None) -> None:
        self.log = log or SideEffectLog()
        self.locations: list[str] = []

    async def push(self, location: str) -> None:
        self.locations.append(location)
        self.log.entries.append(("navigate", location))


__all__ = ["RecordingDispatcher", "RecordingNavigator", "SideEffectLog"]
