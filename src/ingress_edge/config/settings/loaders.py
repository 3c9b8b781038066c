"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from dotenv import load_dotenv

from ingress_edge.config.settings.base import Settings
from ingress_edge.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Build settings from environment variables (``os.environ`` by default).

    Absent variables fall back to the field default; a field without default
    raises :class:`MissingRequiredSettingError`. ``int`` fields are coerced.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        fields = {field.name: field for field in dataclasses.fields(settings_class)}
        values: dict[str, Any] = {}

        for name, env_key in settings_class.env_keys().items():
            field = fields[name]
            raw = environ.get(env_key)
            if raw is not None:
                values[name] = _coerce(env_key, raw, field.type)
            elif field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                raise MissingRequiredSettingError(env_key)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}", cause=exc) from exc


def _coerce(env_key: str, raw: str, annotation: Any) -> Any:
    # dataclass field types are strings under postponed annotations
    if annotation in (int, "int"):
        try:
            return int(raw)
        except ValueError as exc:
            raise InvalidSettingValueError(env_key, raw, "expected an integer") from exc
    return raw


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the process environment, then read it.

    Variables already set in the environment win unless *override* is set.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
