"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   ├── OrderMismatchError
    │   └── UnknownContractError
    ├── ApplicationError         (application.py)
    │   ├── ProviderUnavailableError
    │   └── WalletNotConnectedError
    └── InfrastructureError      (infrastructure.py)
        ├── TimeoutError
        ├── ExternalServiceError
        │   └── QueryExecutionError
        ├── SerializationError
        └── TransactionRejectedError
"""

from nft_market.kernel.errors.application import (
    ApplicationError,
    ProviderUnavailableError,
    WalletNotConnectedError,
)
from nft_market.kernel.errors.base import BaseError, describe
from nft_market.kernel.errors.domain import (
    DomainError,
    OrderMismatchError,
    UnknownContractError,
    ValidationError,
)
from nft_market.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
    QueryExecutionError,
    SerializationError,
    TimeoutError,
    TransactionRejectedError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "OrderMismatchError",
    "ProviderUnavailableError",
    "QueryExecutionError",
    "SerializationError",
    "TimeoutError",
    "TransactionRejectedError",
    "UnknownContractError",
    "ValidationError",
    "WalletNotConnectedError",
    "describe",
]
