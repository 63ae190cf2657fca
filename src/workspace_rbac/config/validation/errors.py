"""Config validation errors."""
from __future__ import annotations

from typing import Any

from workspace_rbac.kernel.errors import WorkspaceRbacError


class ConfigError(WorkspaceRbacError):
    """Raised when configuration cannot be turned into settings."""
    code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``WORKSPACE_RBAC_*`` value was present but rejected.

    ``field`` is the settings attribute and ``env_key`` the environment
    variable that feeds it, so the message points at what to fix.
    """
    code = "invalid_setting_value"

    def __init__(self, field: str, env_key: str, value: object, reason: str) -> None:
        super().__init__(f"{env_key}={value!r} is invalid: {reason}")
        self.field = field
        self.env_key = env_key
        self.value = value
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["field"] = self.field
        payload["env_key"] = self.env_key
        return payload


__all__ = ["ConfigError", "InvalidSettingValueError"]
