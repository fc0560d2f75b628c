"""Ethereum address value object."""

from __future__ import annotations

import dataclasses
import re
from typing import Final

from nft_market.kernel.errors.domain import ValidationError

_ADDRESS_PATTERN: Final = re.compile(r"^0x[0-9a-f]{40}$")


@dataclasses.dataclass(frozen=True, slots=True)
class Address:
    """20-byte hex account or contract address (normalised to lowercase)."""

    value: str

    def __post_init__(self) -> None:
        normalised = self.value.strip().lower()
        object.__setattr__(self, "value", normalised)
        if not _ADDRESS_PATTERN.match(normalised):
            raise ValidationError(f"Invalid address: {self.value!r}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, raw: str) -> "Address":
        return cls(raw)


__all__ = ["Address"]
