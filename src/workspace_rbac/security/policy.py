"""Security — enforcement helpers built on :class:`WorkspaceRole`.

Key pieces:

* :class:`PermissionPolicy` — evaluates a membership against one permission.
* :class:`RoleGate` — evaluates a membership against a minimum role rank.
* :class:`AccessDecision` — the result of either evaluation.
* :func:`require_permission` / :func:`require_role` — decorators that enforce
  a policy against the membership bound in :class:`MembershipContext`.

A requirement given as an untrusted string that does not resolve to a
catalog permission produces a policy that denies every membership.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
from typing import Any, Callable, Protocol, TypeVar

from workspace_rbac.kernel.errors import ForbiddenError
from workspace_rbac.kernel.types.option import Option, Some
from workspace_rbac.observability.logging.audit import AuditLogger, AuditOutcome
from workspace_rbac.security.context import MembershipContext
from workspace_rbac.security.membership import WorkspaceMembership
from workspace_rbac.security.permissions import Permission, PermissionCatalog
from workspace_rbac.security.roles import WorkspaceRole

F = TypeVar("F", bound=Callable[..., Any])


@dataclasses.dataclass(frozen=True)
class AccessDecision:
    """Result of evaluating a membership against a requirement."""

    allowed: bool
    membership: WorkspaceMembership
    requirement: str
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.allowed


class AccessPolicy(Protocol):
    """Port: anything that can judge a membership."""

    def evaluate(self, membership: WorkspaceMembership) -> AccessDecision: ...


def _audit(audit: AuditLogger | None, decision: AccessDecision) -> None:
    if audit is None or decision.allowed:
        return
    audit.log_access(
        decision.membership,
        resource=f"workspace:{decision.membership.workspace_id}",
        action=decision.requirement,
        outcome=AuditOutcome.DENIED,
        role=decision.membership.role.value,
        reason=decision.reason,
    )


class PermissionPolicy:
    """Checks whether a membership's role grants a required permission.

    Example::

        policy = PermissionPolicy(Permission.CONTENT_POSTS_APPROVE)
        decision = policy.evaluate(MembershipContext.require())
        if not decision:
            raise ForbiddenError(decision.reason)
    """

    def __init__(
        self,
        required: Permission | str,
        *,
        audit: AuditLogger | None = None,
    ) -> None:
        self._requested = str(required)
        self._required: Option[Permission] = PermissionCatalog.parse(required)
        self._audit = audit

    @property
    def required(self) -> Option[Permission]:
        return self._required

    def evaluate(self, membership: WorkspaceMembership) -> AccessDecision:
        match self._required:
            case Some(value=permission):
                if membership.has_permission(permission):
                    return AccessDecision(True, membership, permission.value)
                decision = AccessDecision(
                    False,
                    membership,
                    permission.value,
                    reason=(
                        f"role {membership.role.value!r} lacks "
                        f"permission {permission.value!r}"
                    ),
                )
            case _:
                decision = AccessDecision(
                    False,
                    membership,
                    self._requested,
                    reason=f"unknown permission {self._requested!r}",
                )
        _audit(self._audit, decision)
        return decision


class RoleGate:
    """Checks whether a membership's role ranks at or above *minimum*."""

    def __init__(
        self,
        minimum: WorkspaceRole,
        *,
        audit: AuditLogger | None = None,
    ) -> None:
        self._minimum = minimum
        self._audit = audit

    @property
    def minimum(self) -> WorkspaceRole:
        return self._minimum

    def evaluate(self, membership: WorkspaceMembership) -> AccessDecision:
        requirement = f"role>={self._minimum.value}"
        if membership.is_at_least(self._minimum):
            return AccessDecision(True, membership, requirement)
        decision = AccessDecision(
            False,
            membership,
            requirement,
            reason=(
                f"role {membership.role.value!r} ranks below "
                f"{self._minimum.value!r}"
            ),
        )
        _audit(self._audit, decision)
        return decision


def _enforce(policy: AccessPolicy, permission: str | None = None) -> Callable[[F], F]:
    def check() -> None:
        membership = MembershipContext.require()  # raises UnauthorizedError if absent
        decision = policy.evaluate(membership)
        if not decision.allowed:
            raise ForbiddenError(
                decision.reason or "forbidden",
                role=membership.role.value,
                permission=permission,
                workspace_id=membership.workspace_id,
            )

    def decorator(fn: F) -> F:
        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                check()
                return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            check()
            return fn(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


def require_permission(
    permission: Permission | str,
    *,
    audit: AuditLogger | None = None,
) -> Callable[[F], F]:
    """Decorator that enforces *permission* on the current membership.

    Works on both async and sync callables. Raises :class:`UnauthorizedError`
    if no membership is bound, and :class:`ForbiddenError` if its role lacks
    the permission or the permission is not in the catalog.

    Example::

        @require_permission(Permission.WORKSPACE_MEMBERS_MANAGE)
        async def remove_member(cmd: RemoveMemberCommand) -> None:
            ...
    """
    return _enforce(PermissionPolicy(permission, audit=audit), permission=str(permission))


def require_role(
    minimum: WorkspaceRole,
    *,
    audit: AuditLogger | None = None,
) -> Callable[[F], F]:
    """Decorator that enforces a minimum role rank on the current membership."""
    return _enforce(RoleGate(minimum, audit=audit))


__all__ = [
    "AccessDecision",
    "AccessPolicy",
    "PermissionPolicy",
    "RoleGate",
    "require_permission",
    "require_role",
]
