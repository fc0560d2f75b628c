"""GraphQL adapter – GraphQLClient port and HttpxGraphQLClient."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

import httpx

from nft_market.kernel.errors import (
    ExternalServiceError,
    QueryExecutionError,
    SerializationError,
    TimeoutError as InfraTimeoutError,
)
from nft_market.observability.logging import get_logger

_log = get_logger(__name__)


@runtime_checkable
class GraphQLClient(Protocol):
    """Port: execute one query and return its ``data`` object."""

    async def query(
        self, query: str, variables: Mapping[str, Any] | None = None
    ) -> dict[str, Any]: ...


class HttpxGraphQLClient:
    """Thin async httpx wrapper posting GraphQL documents to one endpoint.

    Single attempt: HTTP and transport failures are mapped onto the kernel
    error hierarchy and raised, never retried.
    """

    def __init__(self, url: str, timeout: float = 10.0, **kwargs: Any) -> None:
        self._url = url
        self._client = httpx.AsyncClient(timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxGraphQLClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def query(
        self, query: str, variables: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        payload = {"query": query, "variables": dict(variables or {})}
        try:
            response = await self._client.post(self._url, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise InfraTimeoutError(f"GraphQL request timed out: {self._url}") from exc
        except httpx.HTTPStatusError as exc:
            raise ExternalServiceError(
                service=self._url,
                message=f"HTTP {exc.response.status_code} from {self._url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service=self._url, message=str(exc)) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise SerializationError(
                f"Non-JSON response from {self._url}", payload_type="graphql"
            ) from exc

        if body.get("errors"):
            _log.warning("graphql_errors", url=self._url, errors=body["errors"])
            raise QueryExecutionError(self._url, body["errors"])
        return body.get("data") or {}


__all__ = ["GraphQLClient", "HttpxGraphQLClient"]
