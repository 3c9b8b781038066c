"""Config validation errors."""
from ingress_edge.config.validation.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
