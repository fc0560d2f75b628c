"""Config validation errors.

Every error names the settings field it concerns and, once a loader has
attributed it, the ``NFT_MARKET_*`` variable the value came from. Both are
kept in ``detail`` so a structured log line points at what to fix.
"""
from __future__ import annotations

from typing import Any

from nft_market.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Market settings could not be loaded or did not validate."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, env_key: str | None = None) -> None:
        hint = f" (set {env_key})" if env_key else ""
        super().__init__(
            f"Required setting '{setting_name}' is missing{hint}",
            detail=_source(setting_name, env_key),
        )
        self.setting_name = setting_name
        self.env_key = env_key


class InvalidSettingValueError(ConfigError):
    """A value was present but unusable: bad URL, address, number or level."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: Any,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        super().__init__(
            f"Setting '{env_key or setting_name}' has invalid value {value!r}: {reason}",
            detail={**_source(setting_name, env_key), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.env_key = env_key

    def from_env(self, env_key: str) -> "InvalidSettingValueError":
        """Same error, attributed to the environment variable *env_key*."""
        return type(self)(self.setting_name, self.value, self.reason, env_key=env_key)


def _source(setting_name: str, env_key: str | None) -> dict[str, Any]:
    detail: dict[str, Any] = {"setting": setting_name}
    if env_key:
        detail["env_key"] = env_key
    return detail


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
