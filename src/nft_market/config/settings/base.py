"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from ``<PREFIX>_<FIELD>`` environment variables.

    Subclasses declare fields and set ``_prefix``; :meth:`_validate` runs on
    construction whatever the source (env, ``.env`` file or overrides).
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None: ...

    @classmethod
    def env_key(cls, setting_name: str) -> str:
        """Environment variable for *setting_name* (``a.b`` paths use ``a``)."""
        field_name = setting_name.split(".", 1)[0]
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def required_fields(cls) -> list[str]:
        return [
            f.name
            for f in dataclasses.fields(cls)
            if f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING
        ]


__all__ = ["Settings"]
