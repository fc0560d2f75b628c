"""Domain errors — marketplace rule and invariant violations."""

from __future__ import annotations

from typing import Any

from nft_market.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a marketplace rule / invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class OrderMismatchError(DomainError):
    """An order was paired with an NFT it does not target."""

    default_code = "order_mismatch"

    def __init__(self, order_nft_id: str, nft_id: str, **kwargs: Any) -> None:
        super().__init__(
            "The order does not match the NFT",
            detail={"order_nft_id": order_nft_id, "nft_id": nft_id},
            **kwargs,
        )
        self.order_nft_id = order_nft_id
        self.nft_id = nft_id


class UnknownContractError(DomainError):
    """A contract name has no registered address."""

    default_code = "unknown_contract"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown contract '{name}'", **kwargs)
        self.name = name


__all__ = [
    "DomainError",
    "OrderMismatchError",
    "UnknownContractError",
    "ValidationError",
]
