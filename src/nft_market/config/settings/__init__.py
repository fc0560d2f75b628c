"""Config settings – 12-factor env-based configuration."""
from nft_market.config.settings.base import Settings
from nft_market.config.settings.factory import SettingsFactory
from nft_market.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from nft_market.config.settings.market import MarketSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "MarketSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
