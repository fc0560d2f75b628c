"""Testing fakes – FakeOrderSource."""
from __future__ import annotations

from nft_market.application.orders import FetchOrderOptions
from nft_market.kernel.marketplace import NFT, Order


class FakeOrderSource:
    def __init__(
        self,
        orders: list[Order] | None = None,
        nfts: list[NFT] | None = None,
        fail_with: Exception | None = None,
    ) -> None:
        self._orders = orders or []
        self._nfts = nfts or []
        self._fail_with = fail_with
        self.requested: list[FetchOrderOptions] = []

    async def fetch_orders(self, options: FetchOrderOptions) -> tuple[list[Order], list[NFT]]:
        self.requested.append(options)
        if self._fail_with is not None:
            raise self._fail_with
        return list(self._orders), list(self._nfts)


__all__ = ["FakeOrderSource"]
