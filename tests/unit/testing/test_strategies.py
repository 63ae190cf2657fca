"""Unit tests for the Hypothesis strategies."""
from __future__ import annotations

from unittest.mock import patch

import pytest
from hypothesis import given

from workspace_rbac.security import Permission, PermissionCatalog, WorkspaceMembership, WorkspaceRole
from workspace_rbac.testing.strategies import (
    _require_hypothesis,
    membership_strategy,
    permission_strategy,
    role_strategy,
    unknown_permission_strategy,
)


class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        with patch("builtins.__import__", side_effect=ImportError("hypothesis")):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


class TestStrategies:
    @given(permission_strategy())
    def test_permission(self, permission: Permission) -> None:
        assert isinstance(permission, Permission)

    @given(role_strategy())
    def test_role(self, role: WorkspaceRole) -> None:
        assert isinstance(role, WorkspaceRole)

    @given(unknown_permission_strategy())
    def test_unknown_permission_is_outside_catalog(self, raw: str) -> None:
        assert isinstance(raw, str)
        assert raw not in PermissionCatalog.values()

    @given(membership_strategy())
    def test_membership(self, membership: WorkspaceMembership) -> None:
        assert membership.user_id
        assert membership.workspace_id
        assert isinstance(membership.role, WorkspaceRole)
