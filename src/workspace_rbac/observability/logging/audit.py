"""Observability – AuditLogger.

A dedicated structured-log sink for authorization decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from workspace_rbac.observability.logging.processors import get_logger

if TYPE_CHECKING:
    from workspace_rbac.config.settings import AccessControlSettings


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    GRANTED = "granted"
    DENIED = "denied"


class AuditLogger:
    """Structured-log sink for access decisions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        structlog logger to write to. Defaults to one named ``audit``.
    """

    def __init__(self, service: str = "unknown", logger: Any = None) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    @property
    def service(self) -> str:
        return self._service

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.GRANTED,
        **extra: Any,
    ) -> None:
        """Record an access decision.

        Parameters
        ----------
        principal:
            The actor. Uses ``principal.user_id`` if available, otherwise
            ``str(principal)``.
        resource:
            The resource being accessed (e.g. ``"workspace:42"``).
        action:
            The permission or gate evaluated (e.g. ``"content.posts.approve"``).
        outcome:
            :class:`AuditOutcome` or plain string.
        **extra:
            Additional structured fields to include in the entry.
        """
        principal_id = getattr(principal, "user_id", None) or str(principal)
        self._log.warning(
            "audit.access",
            service=self._service,
            principal_id=principal_id,
            resource=resource,
            action=action,
            outcome=outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        )


def build_audit_logger(settings: AccessControlSettings) -> AuditLogger | None:
    """Return an :class:`AuditLogger` for *settings*, or ``None`` when denials are not audited."""
    if not settings.audit_denials:
        return None
    return AuditLogger(service=settings.service_name)


__all__ = ["AuditLogger", "AuditOutcome", "build_audit_logger"]
