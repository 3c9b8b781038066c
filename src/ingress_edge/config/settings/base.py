"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass settings read from flat, upper-case environment variables.

    Field ``redis_uri_ingress`` is read from ``REDIS_URI_INGRESS`` and so on.
    :meth:`_validate` runs on construction, so an instance is always valid.
    """

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return field_name.upper()

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map every field name to the environment variable it is read from."""
        return {field.name: cls.env_key(field.name) for field in dataclasses.fields(cls)}

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to check loaded values."""


__all__ = ["Settings"]
