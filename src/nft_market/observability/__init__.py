"""Observability – structured logging."""

from nft_market.observability.logging import JsonLoggerFactory, Logger, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "get_logger"]
