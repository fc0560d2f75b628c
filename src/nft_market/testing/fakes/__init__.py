"""Testing fakes – in-memory doubles for the marketplace ports."""
from nft_market.testing.fakes.chain import FakeEthereumProvider, FakeMarketplaceContract
from nft_market.testing.fakes.clock import FakeClock
from nft_market.testing.fakes.effects import RecordingDispatcher, RecordingNavigator, SideEffectLog
from nft_market.testing.fakes.graphql import FakeGraphQLClient
from nft_market.testing.fakes.orders import FakeOrderSource

__all__ = [
    "FakeClock",
    "FakeEthereumProvider",
    "FakeGraphQLClient",
    "FakeMarketplaceContract",
    "FakeOrderSource",
    "RecordingDispatcher",
    "RecordingNavigator",
    "SideEffectLog",
]
