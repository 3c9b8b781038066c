"""Config – 12-factor settings for the ingestion edge."""
from ingress_edge.config.settings import DotenvSettingsLoader, EnvSettingsLoader, IngressSettings, Settings
from ingress_edge.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "IngressSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
]
