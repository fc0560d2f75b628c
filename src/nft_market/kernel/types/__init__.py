"""Kernel value-object types — public re-export surface.

Modules:
  address.py — Address
  wei.py     — to_wei, from_wei
"""

from nft_market.kernel.types.address import Address
from nft_market.kernel.types.wei import ETHER_DECIMALS, WEI_PER_ETHER, from_wei, to_wei

__all__ = [
    "Address",
    "ETHER_DECIMALS",
    "WEI_PER_ETHER",
    "from_wei",
    "to_wei",
]
