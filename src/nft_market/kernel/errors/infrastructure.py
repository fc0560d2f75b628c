"""Infrastructure errors — indexing service and chain I/O failures."""

from __future__ import annotations

from typing import Any

from nft_market.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class SerializationError(InfrastructureError):
    """A service payload could not be decoded into a record."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class QueryExecutionError(ExternalServiceError):
    """The indexing service answered with a GraphQL ``errors`` payload."""

    default_code = "query_execution_error"

    def __init__(
        self,
        service: str,
        errors: list[dict[str, Any]],
        **kwargs: Any,
    ) -> None:
        messages = [str(e.get("message", e)) for e in errors] or ["unknown error"]
        super().__init__(service, "; ".join(messages), detail={"errors": errors}, **kwargs)
        self.errors = errors


class TransactionRejectedError(InfrastructureError):
    """A contract write was refused by the wallet or the node."""

    default_code = "transaction_rejected"

    def __init__(self, method: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Transaction '{method}' was rejected", **kwargs)
        self.method = method


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "QueryExecutionError",
    "SerializationError",
    "TimeoutError",
    "TransactionRejectedError",
]
