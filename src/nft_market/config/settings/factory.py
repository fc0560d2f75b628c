"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from nft_market.config.settings.base import Settings
from nft_market.config.settings.loaders import SettingsLoader
from nft_market.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from nft_market.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader that cannot see every required field is skipped so the
    remaining sources (or the overrides) may still complete the settings.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~nft_market.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sequence of loaders.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except MissingRequiredSettingError as exc:
                _log.debug(
                    "settings_loader_skipped",
                    loader=type(loader).__name__,
                    setting=exc.setting_name,
                    env_key=exc.env_key,
                )
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for name in settings_cls.required_fields():
            if name not in merged:
                raise MissingRequiredSettingError(name, env_key=settings_cls.env_key(name))

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
