"""Config settings – AccessControlSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from workspace_rbac.config.validation import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class AccessControlSettings:
    """Runtime knobs for logging and auditing around the RBAC core.

    Each field is read from ``WORKSPACE_RBAC_<FIELD>`` by
    :class:`~workspace_rbac.config.settings.loaders.EnvSettingsLoader`.
    Values are checked on construction, whichever way they arrive.
    """

    ENV_PREFIX: ClassVar[str] = "WORKSPACE_RBAC"

    service_name: str = "workspace-rbac"
    log_level: str = "INFO"
    log_json: bool = True
    audit_denials: bool = True

    @classmethod
    def env_key(cls, field: str) -> str:
        return f"{cls.ENV_PREFIX}_{field.upper()}"

    def __post_init__(self) -> None:
        if not self.service_name.strip():
            self._reject("service_name", self.service_name, "must not be empty")
        if self.log_level.upper() not in logging.getLevelNamesMapping():
            self._reject("log_level", self.log_level, "not a standard logging level name")

    def _reject(self, field: str, value: object, reason: str) -> None:
        raise InvalidSettingValueError(field, self.env_key(field), value, reason)


__all__ = ["AccessControlSettings"]
