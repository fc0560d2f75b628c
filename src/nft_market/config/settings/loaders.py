"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from nft_market.config.settings.base import Settings
from nft_market.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Errors are attributed to the variable that carried the value, including
    those raised by the settings' own validation.
    """

    def load(self, settings_class: type[T]) -> T:
        required = set(settings_class.required_fields())
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = settings_class.env_key(field.name)
            raw = os.environ.get(env_key)

            if raw is None:
                if field.name in required:
                    raise MissingRequiredSettingError(field.name, env_key=env_key)
                continue

            try:
                kwargs[field.name] = self._coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(field.name, raw, str(exc), env_key=env_key) from exc

        try:
            return settings_class(**kwargs)
        except InvalidSettingValueError as exc:
            raise exc.from_env(settings_class.env_key(exc.setting_name)) from exc
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        # annotations arrive as strings under ``from __future__ import annotations``
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")
        origin = getattr(type_hint, "__origin__", None)
        if hint == "bool":
            return value.lower() in ("1", "true", "yes", "on")
        if hint == "int":
            return int(value)
        if hint == "float":
            return float(value)
        if origin is dict or hint.startswith("dict"):
            return _parse_pairs(value)
        if origin is list or hint.startswith("list"):
            return [v.strip() for v in value.split(",") if v.strip()]
        return value


def _parse_pairs(value: str) -> dict[str, str]:
    """Parse ``name=value,name=value``."""
    pairs: dict[str, str] = {}
    for item in value.split(","):
        if not item.strip():
            continue
        name, sep, raw = item.partition("=")
        if not sep or not name.strip():
            raise ValueError(f"expected name=value, got {item.strip()!r}")
        pairs[name.strip()] = raw.strip()
    return pairs


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
