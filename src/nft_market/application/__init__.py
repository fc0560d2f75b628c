"""Application – listing search and order workflows (framework-agnostic)."""

from nft_market.application.listings import ListingRepository, Page
from nft_market.application.orders import OrderOrchestrator, WalletContext
from nft_market.application.search import ListingFilters, ListingQueryCompiler, SearchRequest

__all__ = [
    "ListingFilters",
    "ListingQueryCompiler",
    "ListingRepository",
    "OrderOrchestrator",
    "Page",
    "SearchRequest",
    "WalletContext",
]
