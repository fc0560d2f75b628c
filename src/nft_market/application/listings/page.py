"""Application listings – Page of results."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """Offset-based page of results (``first``/``skip`` addressing)."""

    items: list[T]
    total: int
    first: int
    skip: int = 0

    @property
    def number(self) -> int:
        """1-based page number."""
        if self.first <= 0:
            return 1
        return self.skip // self.first + 1

    @property
    def total_pages(self) -> int:
        if self.first <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.first)

    @property
    def has_next(self) -> bool:
        return self.skip + len(self.items) < self.total

    @property
    def has_previous(self) -> bool:
        return self.skip > 0

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            first=self.first,
            skip=self.skip,
        )


__all__ = ["Page"]
