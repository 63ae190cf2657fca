"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping

from workspace_rbac.config.settings.access_control import AccessControlSettings
from workspace_rbac.config.validation import InvalidSettingValueError

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class EnvSettingsLoader:
    """Build :class:`AccessControlSettings` from ``WORKSPACE_RBAC_*`` variables.

    Unset variables keep the field default. Pass *environ* to read from
    another mapping (tests do).
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self) -> AccessControlSettings:
        environ = os.environ if self._environ is None else self._environ
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(AccessControlSettings):
            env_key = AccessControlSettings.env_key(field.name)
            raw = environ.get(env_key)
            if raw is None:
                continue
            if field.type in (bool, "bool"):
                kwargs[field.name] = _parse_bool(field.name, env_key, raw)
            else:
                kwargs[field.name] = raw
        return AccessControlSettings(**kwargs)


def _parse_bool(field: str, env_key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidSettingValueError(field, env_key, raw, "expected a boolean such as 'true' or '0'")


def load_settings(loader: EnvSettingsLoader | None = None) -> AccessControlSettings:
    """Load :class:`AccessControlSettings`, from the environment by default."""
    return (loader or EnvSettingsLoader()).load()


__all__ = ["EnvSettingsLoader", "load_settings"]
