"""Application-layer errors — wallet/provider preconditions at use-case level."""

from __future__ import annotations

from nft_market.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ProviderUnavailableError(ApplicationError):
    """No Ethereum provider could be reached."""

    default_code = "provider_unavailable"

    def __init__(self, message: str = "Could not connect to Ethereum") -> None:
        super().__init__(message)


class WalletNotConnectedError(ApplicationError):
    """The session has no connected wallet address."""

    default_code = "wallet_not_connected"

    def __init__(self, message: str = "Invalid address. Wallet must be connected.") -> None:
        super().__init__(message)


__all__ = [
    "ApplicationError",
    "ProviderUnavailableError",
    "WalletNotConnectedError",
]
