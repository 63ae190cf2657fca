"""Errors raised by the enforcement decorators in :mod:`workspace_rbac.security`."""

from __future__ import annotations

from typing import Any

from workspace_rbac.kernel.errors.base import WorkspaceRbacError


class UnauthorizedError(WorkspaceRbacError):
    """No workspace membership is bound to the current context."""

    code = "unauthorized"


class ForbiddenError(WorkspaceRbacError):
    """The acting membership failed a permission or role gate.

    ``permission`` is the requested identifier exactly as the caller wrote
    it (unknown strings included) and is ``None`` for role gates. ``role``
    is the wire value of the role that was denied.
    """

    code = "forbidden"

    def __init__(
        self,
        message: str,
        *,
        role: str,
        permission: str | None = None,
        workspace_id: str | None = None,
    ) -> None:
        super().__init__(message, workspace_id=workspace_id)
        self.role = role
        self.permission = permission

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["role"] = self.role
        if self.permission is not None:
            payload["permission"] = self.permission
        return payload


__all__ = ["ForbiddenError", "UnauthorizedError"]
