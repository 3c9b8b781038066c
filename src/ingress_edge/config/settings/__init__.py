"""Config settings – env-based configuration."""
from ingress_edge.config.settings.base import Settings
from ingress_edge.config.settings.ingress import IngressSettings
from ingress_edge.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "IngressSettings", "Settings", "SettingsLoader"]
