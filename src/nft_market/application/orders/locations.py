"""Application orders – navigation targets."""
from __future__ import annotations


class _Locations:
    def activity(self) -> str:
        return "/activity"


locations = _Locations()

__all__ = ["locations"]
