"""Unit tests for settings loading."""

from __future__ import annotations

import dataclasses

import pytest

from workspace_rbac.config.settings import (
    AccessControlSettings,
    EnvSettingsLoader,
    load_settings,
)
from workspace_rbac.config.validation import ConfigError, InvalidSettingValueError


class TestAccessControlSettings:
    def test_defaults(self) -> None:
        s = AccessControlSettings()
        assert s.service_name == "workspace-rbac"
        assert s.log_level == "INFO"
        assert s.log_json is True
        assert s.audit_denials is True

    def test_env_key(self) -> None:
        assert AccessControlSettings.env_key("log_json") == "WORKSPACE_RBAC_LOG_JSON"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AccessControlSettings(log_level="LOUD")
        assert exc_info.value.field == "log_level"
        assert exc_info.value.env_key == "WORKSPACE_RBAC_LOG_LEVEL"

    def test_log_level_case_insensitive(self) -> None:
        assert AccessControlSettings(log_level="debug").log_level == "debug"

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_service_name(self, name: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            AccessControlSettings(service_name=name)
        assert exc_info.value.env_key == "WORKSPACE_RBAC_SERVICE_NAME"

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AccessControlSettings().log_json = False  # type: ignore[misc]


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self) -> None:
        assert EnvSettingsLoader(environ={}).load() == AccessControlSettings()

    def test_reads_prefixed_variables(self) -> None:
        env = {
            "WORKSPACE_RBAC_SERVICE_NAME": "inbox-api",
            "WORKSPACE_RBAC_LOG_LEVEL": "WARNING",
            "WORKSPACE_RBAC_LOG_JSON": "false",
            "WORKSPACE_RBAC_AUDIT_DENIALS": "0",
        }
        s = EnvSettingsLoader(environ=env).load()
        assert s.service_name == "inbox-api"
        assert s.log_level == "WARNING"
        assert s.log_json is False
        assert s.audit_denials is False

    def test_ignores_unprefixed_variables(self) -> None:
        s = EnvSettingsLoader(environ={"LOG_LEVEL": "chatty", "SERVICE_NAME": ""}).load()
        assert s == AccessControlSettings()

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on", " On "])
    def test_truthy_booleans(self, raw: str) -> None:
        env = {"WORKSPACE_RBAC_LOG_JSON": raw}
        assert EnvSettingsLoader(environ=env).load().log_json is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off"])
    def test_falsy_booleans(self, raw: str) -> None:
        env = {"WORKSPACE_RBAC_AUDIT_DENIALS": raw}
        assert EnvSettingsLoader(environ=env).load().audit_denials is False

    @pytest.mark.parametrize("raw", ["", "maybe", "2"])
    def test_unrecognised_boolean_is_rejected(self, raw: str) -> None:
        env = {"WORKSPACE_RBAC_AUDIT_DENIALS": raw}
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader(environ=env).load()
        assert exc_info.value.field == "audit_denials"
        assert exc_info.value.env_key == "WORKSPACE_RBAC_AUDIT_DENIALS"
        assert exc_info.value.value == raw

    def test_invalid_value_propagates(self) -> None:
        env = {"WORKSPACE_RBAC_LOG_LEVEL": "chatty"}
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader(environ=env).load()
        assert "WORKSPACE_RBAC_LOG_LEVEL='chatty'" in str(exc_info.value)

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WORKSPACE_RBAC_SERVICE_NAME", "from-env")
        assert load_settings().service_name == "from-env"

    def test_load_settings_accepts_loader(self) -> None:
        loader = EnvSettingsLoader(environ={"WORKSPACE_RBAC_LOG_JSON": "no"})
        assert load_settings(loader).log_json is False
