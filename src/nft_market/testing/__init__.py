"""Testing support – in-memory fakes and record builders.

Import in tests::

    from nft_market.testing import FakeMarketplaceContract, RecordingDispatcher, nft_builder
"""

from nft_market.testing.builders import graph_nft, nft_builder, order_builder
from nft_market.testing.fakes import (
    FakeClock,
    FakeEthereumProvider,
    FakeGraphQLClient,
    FakeMarketplaceContract,
    FakeOrderSource,
    RecordingDispatcher,
    RecordingNavigator,
    SideEffectLog,
)

__all__ = [
    "FakeClock",
    "FakeEthereumProvider",
    "FakeGraphQLClient",
    "FakeMarketplaceContract",
    "FakeOrderSource",
    "RecordingDispatcher",
    "RecordingNavigator",
    "SideEffectLog",
    "graph_nft",
    "nft_builder",
    "order_builder",
]
