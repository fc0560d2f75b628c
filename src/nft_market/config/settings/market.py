"""Config settings – MarketSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from nft_market.config.settings.base import Settings
from nft_market.config.validation import InvalidSettingValueError
from nft_market.kernel.errors import ValidationError
from nft_market.kernel.marketplace import Network
from nft_market.kernel.types import Address


@dataclasses.dataclass
class MarketSettings(Settings):
    """Endpoints and deployment addresses for one marketplace network.

    Environment (prefix ``NFT_MARKET``)::

        NFT_MARKET_GRAPH_URL=https://api.thegraph.com/subgraphs/name/decentraland/marketplace
        NFT_MARKET_MARKETPLACE_ADDRESS=0x8e5660b4ab70168b5a6feea0e0315cb49c8cd539
        NFT_MARKET_CONTRACT_ADDRESSES=MyCollection=0x0000000000000000000000000000000000000001
    """

    _prefix: ClassVar[str] = "NFT_MARKET"

    graph_url: str
    marketplace_address: str
    network: str = Network.ETHEREUM.value
    request_timeout: float = 10.0
    log_level: str = "INFO"
    log_json: bool = True
    contract_addresses: dict[str, str] = dataclasses.field(default_factory=dict)

    def _validate(self) -> None:
        if not self.graph_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("graph_url", self.graph_url, "must be an http(s) URL")
        _check_address("marketplace_address", self.marketplace_address)
        for name, address in self.contract_addresses.items():
            _check_address(f"contract_addresses.{name}", address)
        if self.network.upper() not in Network.__members__:
            raise InvalidSettingValueError(
                "network", self.network, f"expected one of {', '.join(Network.__members__)}"
            )
        if self.request_timeout <= 0:
            raise InvalidSettingValueError("request_timeout", self.request_timeout, "must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown level")

    @property
    def network_enum(self) -> Network:
        return Network[self.network.upper()]


def _check_address(name: str, value: str) -> None:
    try:
        Address(value)
    except ValidationError as exc:
        raise InvalidSettingValueError(name, value, exc.message) from exc


__all__ = ["MarketSettings"]
