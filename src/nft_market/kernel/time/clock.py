"""Kernel time – Clock protocol + implementations.

The indexing service stores order expirations as milliseconds since the
Unix epoch, so every clock also answers in that unit.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def millis(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def millis(self) -> int:
        return epoch_millis(self.now())


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def millis(self) -> int:
        return epoch_millis(self._fixed)

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def epoch_millis(moment: datetime) -> int:
    """Milliseconds since the epoch for an aware *moment*."""
    return int(moment.timestamp() * 1000)


__all__ = ["Clock", "FrozenClock", "SystemClock", "epoch_millis"]
