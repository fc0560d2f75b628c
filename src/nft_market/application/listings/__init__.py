"""Application listings – paging, repository port, on-sale rows."""
from nft_market.application.listings.on_sale import OnSaleItem, SaleType, build_on_sale_items
from nft_market.application.listings.page import Page
from nft_market.application.listings.ports import ListingRepository

__all__ = ["ListingRepository", "OnSaleItem", "Page", "SaleType", "build_on_sale_items"]
