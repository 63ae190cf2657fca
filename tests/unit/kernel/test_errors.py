"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from workspace_rbac.config.validation import ConfigError, InvalidSettingValueError
from workspace_rbac.kernel.errors import (
    ForbiddenError,
    UnauthorizedError,
    WorkspaceRbacError,
)


class TestWorkspaceRbacError:
    def test_str_is_message(self) -> None:
        err = WorkspaceRbacError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_code(self) -> None:
        assert WorkspaceRbacError("m").code == "workspace_rbac_error"

    def test_to_dict_without_workspace(self) -> None:
        assert WorkspaceRbacError("m").to_dict() == {
            "code": "workspace_rbac_error",
            "message": "m",
        }

    def test_to_dict_with_workspace(self) -> None:
        payload = WorkspaceRbacError("m", workspace_id="ws-9").to_dict()
        assert payload["workspace_id"] == "ws-9"

    def test_cause_is_chained_with_raise_from(self) -> None:
        root = KeyError("x")
        with pytest.raises(WorkspaceRbacError) as exc_info:
            try:
                raise root
            except KeyError as exc:
                raise WorkspaceRbacError("wrapped") from exc
        assert exc_info.value.__cause__ is root

    def test_repr(self) -> None:
        assert repr(UnauthorizedError("m")) == "UnauthorizedError('m')"


class TestHierarchy:
    def test_enforcement_errors(self) -> None:
        assert issubclass(UnauthorizedError, WorkspaceRbacError)
        assert issubclass(ForbiddenError, WorkspaceRbacError)

    def test_config_errors(self) -> None:
        assert issubclass(ConfigError, WorkspaceRbacError)
        assert issubclass(InvalidSettingValueError, ConfigError)


class TestForbiddenError:
    def test_attributes(self) -> None:
        err = ForbiddenError("no", role="admin", permission="workspace.delete", workspace_id="ws-1")
        assert err.code == "forbidden"
        assert err.role == "admin"
        assert err.permission == "workspace.delete"
        assert err.workspace_id == "ws-1"

    def test_to_dict(self) -> None:
        err = ForbiddenError("no", role="admin", permission="workspace.delete", workspace_id="ws-1")
        assert err.to_dict() == {
            "code": "forbidden",
            "message": "no",
            "workspace_id": "ws-1",
            "role": "admin",
            "permission": "workspace.delete",
        }

    def test_role_gate_denial_has_no_permission_key(self) -> None:
        payload = ForbiddenError("no", role="viewer").to_dict()
        assert payload["role"] == "viewer"
        assert "permission" not in payload

    def test_unauthorized_code(self) -> None:
        assert UnauthorizedError("x").code == "unauthorized"


class TestConfigErrors:
    def test_invalid_value_names_field_and_env_key(self) -> None:
        err = InvalidSettingValueError("log_level", "WORKSPACE_RBAC_LOG_LEVEL", "LOUD", "bad")
        assert err.field == "log_level"
        assert err.env_key == "WORKSPACE_RBAC_LOG_LEVEL"
        assert err.value == "LOUD"
        assert err.reason == "bad"
        assert err.code == "invalid_setting_value"
        assert str(err) == "WORKSPACE_RBAC_LOG_LEVEL='LOUD' is invalid: bad"

    def test_invalid_value_to_dict(self) -> None:
        err = InvalidSettingValueError("log_json", "WORKSPACE_RBAC_LOG_JSON", "maybe", "bad")
        payload = err.to_dict()
        assert payload["field"] == "log_json"
        assert payload["env_key"] == "WORKSPACE_RBAC_LOG_JSON"
