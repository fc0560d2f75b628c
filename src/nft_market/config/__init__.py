"""Config – 12-factor settings and loaders."""

from nft_market.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    MarketSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from nft_market.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MarketSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
