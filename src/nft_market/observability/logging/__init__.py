"""Observability – structured logging ports and helpers."""
from nft_market.observability.logging.protocol import Logger
from nft_market.observability.logging.factory import JsonLoggerFactory
from nft_market.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
