"""Kernel – framework-agnostic building blocks: errors, time, value types, records."""

from nft_market.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ExternalServiceError,
    InfrastructureError,
    ValidationError,
)
from nft_market.kernel.marketplace import NFT, Collection, Order

__all__ = [
    "ApplicationError",
    "BaseError",
    "Collection",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "NFT",
    "Order",
    "ValidationError",
]
