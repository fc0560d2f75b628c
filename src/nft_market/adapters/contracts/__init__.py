"""Contracts adapter – name/address registry."""
from nft_market.adapters.contracts.registry import DEFAULT_CONTRACT_ADDRESSES, ContractName, ContractRegistry

__all__ = ["ContractName", "ContractRegistry", "DEFAULT_CONTRACT_ADDRESSES"]
