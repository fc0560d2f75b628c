"""Contracts adapter – ContractRegistry."""
from __future__ import annotations

from enum import Enum
from typing import Final, Mapping

from nft_market.kernel.errors import UnknownContractError
from nft_market.kernel.types import Address


class ContractName(str, Enum):
    MARKETPLACE = "Marketplace"
    LAND = "LANDRegistry"
    ESTATE = "EstateRegistry"
    DCL_REGISTRAR = "DCLRegistrar"


# Ethereum mainnet deployments
DEFAULT_CONTRACT_ADDRESSES: Final[Mapping[str, str]] = {
    ContractName.MARKETPLACE.value: "0x8e5660b4ab70168b5a6feea0e0315cb49c8cd539",
    ContractName.LAND.value: "0xf87e31492faf9a91b02ee0deaad50d51d56d5d4d",
    ContractName.ESTATE.value: "0x959e104e1a4db6317fa58f8295f586e1a978c297",
    ContractName.DCL_REGISTRAR.value: "0x2a187453064356c898cae034eaed119e1663acb8",
}


class ContractRegistry:
    """Maps contract names (including wearable collections) to addresses.

    Addresses are validated and normalised on registration, so lookups
    always return lowercase hex.
    """

    def __init__(self, addresses: Mapping[str, str] | None = None) -> None:
        self._addresses: dict[str, str] = {}
        for name, address in (addresses or {}).items():
            self.register(name, address)

    @classmethod
    def with_defaults(cls, overrides: Mapping[str, str] | None = None) -> "ContractRegistry":
        return cls({**DEFAULT_CONTRACT_ADDRESSES, **(overrides or {})})

    def register(self, name: str, address: str) -> None:
        self._addresses[str(getattr(name, "value", name))] = str(Address(address))

    def address_of(self, name: str) -> str:
        key = str(getattr(name, "value", name))
        try:
            return self._addresses[key]
        except KeyError:
            raise UnknownContractError(key) from None

    def name_of(self, address: str) -> str | None:
        wanted = address.lower()
        for name, known in self._addresses.items():
            if known == wanted:
                return name
        return None

    def names(self) -> list[str]:
        return sorted(self._addresses)

    def __contains__(self, name: object) -> bool:
        return str(getattr(name, "value", name)) in self._addresses


__all__ = ["ContractName", "ContractRegistry", "DEFAULT_CONTRACT_ADDRESSES"]
