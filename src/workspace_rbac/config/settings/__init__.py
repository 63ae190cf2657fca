"""Config settings – 12-factor env-based configuration."""
from workspace_rbac.config.settings.access_control import AccessControlSettings
from workspace_rbac.config.settings.loaders import EnvSettingsLoader, load_settings

__all__ = [
    "AccessControlSettings",
    "EnvSettingsLoader",
    "load_settings",
]
