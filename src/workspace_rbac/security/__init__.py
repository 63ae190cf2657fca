"""Security – permission catalog, workspace roles, membership and enforcement."""
from workspace_rbac.security.permissions import Permission, PermissionCatalog
from workspace_rbac.security.roles import OWNER_ONLY_PERMISSIONS, WorkspaceRole
from workspace_rbac.security.membership import WorkspaceMembership
from workspace_rbac.security.context import MembershipContext
from workspace_rbac.security.policy import (
    AccessDecision,
    AccessPolicy,
    PermissionPolicy,
    RoleGate,
    require_permission,
    require_role,
)

__all__ = [
    "AccessDecision",
    "AccessPolicy",
    "MembershipContext",
    "OWNER_ONLY_PERMISSIONS",
    "Permission",
    "PermissionCatalog",
    "PermissionPolicy",
    "RoleGate",
    "WorkspaceMembership",
    "WorkspaceRole",
    "require_permission",
    "require_role",
]
