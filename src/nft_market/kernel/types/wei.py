"""Fixed-point conversion between human-denominated amounts and wei."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Final

from nft_market.kernel.errors.domain import ValidationError

ETHER_DECIMALS: Final = 18
WEI_PER_ETHER: Final = 10**ETHER_DECIMALS


def to_wei(amount: "str | int | float | Decimal") -> int:
    """Convert an ether-scale *amount* to an integer number of wei.

    Floats go through ``str`` first so ``0.1`` means one tenth, not its
    binary approximation.
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid price: {amount!r}", cause=exc) from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid price: {amount!r}")
    if value < 0:
        raise ValidationError("Price must be non-negative")
    with localcontext() as ctx:
        # uint256 needs 78 significant digits
        ctx.prec = 78
        wei = value * WEI_PER_ETHER
    if wei != wei.to_integral_value():
        raise ValidationError(
            f"Price {amount!r} has more than {ETHER_DECIMALS} decimal places"
        )
    return int(wei)


def from_wei(wei: "int | str") -> Decimal:
    """Convert an integer wei amount back to ether scale."""
    with localcontext() as ctx:
        ctx.prec = 78
        return Decimal(int(wei)) / WEI_PER_ETHER


__all__ = ["ETHER_DECIMALS", "WEI_PER_ETHER", "from_wei", "to_wei"]
