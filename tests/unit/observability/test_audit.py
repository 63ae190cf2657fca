"""Unit tests for the audit sink."""

from __future__ import annotations

from unittest.mock import MagicMock

from workspace_rbac.config.settings import AccessControlSettings
from workspace_rbac.observability.logging import AuditLogger, AuditOutcome, build_audit_logger
from workspace_rbac.security import WorkspaceMembership, WorkspaceRole


class TestAuditLogger:
    def test_log_access_emits_warning(self) -> None:
        sink = MagicMock()
        AuditLogger(service="inbox-api", logger=sink).log_access(
            "svc-account",
            resource="workspace:1",
            action="inbox.items.assign",
            outcome=AuditOutcome.DENIED,
            reason="nope",
        )
        args, kwargs = sink.warning.call_args
        assert args == ("audit.access",)
        assert kwargs["service"] == "inbox-api"
        assert kwargs["principal_id"] == "svc-account"
        assert kwargs["outcome"] == "denied"
        assert kwargs["reason"] == "nope"
        assert "timestamp" in kwargs

    def test_uses_membership_user_id(self) -> None:
        sink = MagicMock()
        m = WorkspaceMembership(user_id="u-1", workspace_id="ws", role=WorkspaceRole.VIEWER)
        AuditLogger(logger=sink).log_access(m, resource="r", action="a", outcome="granted")
        assert sink.warning.call_args.kwargs["principal_id"] == "u-1"
        assert sink.warning.call_args.kwargs["outcome"] == "granted"


class TestBuildAuditLogger:
    def test_enabled(self) -> None:
        audit = build_audit_logger(AccessControlSettings(service_name="billing"))
        assert isinstance(audit, AuditLogger)
        assert audit.service == "billing"

    def test_disabled(self) -> None:
        assert build_audit_logger(AccessControlSettings(audit_denials=False)) is None
