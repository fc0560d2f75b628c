"""GraphQL adapter – indexing-service client and listing repository."""
from nft_market.adapters.graphql.client import GraphQLClient, HttpxGraphQLClient
from nft_market.adapters.graphql.decoders import decode_active_order, decode_collection, decode_nft
from nft_market.adapters.graphql.repository import GraphListingRepository

__all__ = [
    "GraphListingRepository",
    "GraphQLClient",
    "HttpxGraphQLClient",
    "decode_active_order",
    "decode_collection",
    "decode_nft",
]
