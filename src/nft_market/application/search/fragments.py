"""Application search – GraphQL fragments and fixed queries."""
from __future__ import annotations

from typing import Final

__all__ = [
    "COLLECTIONS_QUERY",
    "COLLECTION_FRAGMENT",
    "NFT_BY_ADDRESS_AND_ID_QUERY",
    "NFT_FRAGMENT",
]

NFT_FRAGMENT: Final = """fragment nftFragment on NFT {
  id
  name
  image
  contractAddress
  tokenId
  category
  owner {
    address
  }
  searchOrderPrice
  searchOrderStatus
  searchOrderExpiresAt
  activeOrder {
    id
    owner
    price
    status
    expiresAt
  }
  wearable {
    description
    category
    rarity
    bodyShapes
  }
}"""

COLLECTION_FRAGMENT: Final = """fragment collectionFragment on Collection {
  id
  name
  creator
  isApproved
}"""

NFT_BY_ADDRESS_AND_ID_QUERY: Final = f"""query NFTByTokenId($contractAddress: String, $tokenId: String) {{
  nfts(
    where: {{ contractAddress: $contractAddress, tokenId: $tokenId }}
    first: 1
  ) {{
    ...nftFragment
  }}
}}
{NFT_FRAGMENT}"""

COLLECTIONS_QUERY: Final = f"""query Collections {{
  collections {{
    ...collectionFragment
  }}
}}
{COLLECTION_FRAGMENT}"""
