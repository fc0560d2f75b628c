"""
nft_market – Marketplace client core.

Import path convention::

    from nft_market.application.search import ListingQueryCompiler, SearchRequest
    from nft_market.application.orders import OrderOrchestrator, CreateOrderRequest
    from nft_market.adapters.graphql import GraphListingRepository, HttpxGraphQLClient
    from nft_market.kernel.errors import DomainError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
