"""Security — WorkspaceMembership value object."""

from __future__ import annotations

import dataclasses

from workspace_rbac.security.permissions import Permission
from workspace_rbac.security.roles import WorkspaceRole


@dataclasses.dataclass(frozen=True)
class WorkspaceMembership:
    """A user's role within one workspace.

    Persisting memberships, and the rules for changing them, belong to the
    caller; this object only answers authorization questions by delegating
    to its :class:`WorkspaceRole`.
    """

    user_id: str
    workspace_id: str
    role: WorkspaceRole

    def has_permission(self, permission: Permission | str) -> bool:
        return self.role.has_permission(permission)

    def is_at_least(self, role: WorkspaceRole) -> bool:
        return self.role.is_at_least(role)

    @property
    def is_owner(self) -> bool:
        return self.role is WorkspaceRole.OWNER

    @property
    def is_admin(self) -> bool:
        return self.role is WorkspaceRole.ADMIN

    @property
    def is_editor(self) -> bool:
        return self.role is WorkspaceRole.EDITOR

    @property
    def is_viewer(self) -> bool:
        return self.role is WorkspaceRole.VIEWER

    def with_role(self, role: WorkspaceRole) -> WorkspaceMembership:
        """Return a copy of this membership holding *role*."""
        return dataclasses.replace(self, role=role)

    def __str__(self) -> str:
        return f"{self.user_id}@{self.workspace_id}"


__all__ = ["WorkspaceMembership"]
