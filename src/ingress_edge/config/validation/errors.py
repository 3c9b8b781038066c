"""Config validation – errors raised while loading IngressSettings."""
from ingress_edge.kernel.errors import BaseError


class ConfigError(BaseError):
    """The process cannot start with the environment it was given."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"{setting_name} is not set", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """``setting_name`` is set but unusable; the value itself is kept out of ``detail``."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}: {reason}", detail={"setting": setting_name})
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
