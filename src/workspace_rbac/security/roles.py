"""Security — workspace roles, their rank and their permission sets.

* ``OWNER`` — every permission, including billing and workspace deletion.
* ``ADMIN`` — everything except the four owner-only permissions.
* ``EDITOR`` — content creation, inbox reply, analytics, AI assist; no
  approvals or direct publishing.
* ``VIEWER`` — read-only across workspace, content, inbox, WhatsApp and
  analytics.

The EDITOR and VIEWER sets are hand-curated lists, not derived from a naming
rule. Rank and permission-set containment are independent: rank answers
"at least as powerful as", the sets answer "may do X".
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any

from workspace_rbac.kernel.types.option import Nothing, Option, Some
from workspace_rbac.observability.logging.processors import get_logger
from workspace_rbac.security.permissions import Permission, PermissionCatalog

_log = get_logger(__name__)

# Untrusted strings are logged truncated.
_MAX_LOGGED_PERMISSION = 200


class WorkspaceRole(str, Enum):
    """The role of a user within a workspace."""

    OWNER = "owner"
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``"Owner"``."""
        return _LABELS[self]

    @property
    def rank(self) -> int:
        """Position in the hierarchy: OWNER=4, ADMIN=3, EDITOR=2, VIEWER=1."""
        return _RANKS[self]

    def is_at_least(self, other: WorkspaceRole) -> bool:
        """Return ``True`` if this role ranks at or above *other*."""
        return self.rank >= other.rank

    @property
    def permissions(self) -> frozenset[Permission]:
        return _GRANTS[self]

    def has_permission(self, permission: Permission | str) -> bool:
        """Return ``True`` if this role grants *permission*.

        Strings are resolved through :meth:`PermissionCatalog.parse`; an
        identifier outside the catalog is denied for every role.
        """
        if isinstance(permission, Permission):
            return permission in _GRANTS[self]
        match PermissionCatalog.parse(permission):
            case Some(value=resolved):
                return resolved in _GRANTS[self]
            case _:
                _log.debug(
                    "rbac.unknown_permission",
                    role=self.value,
                    permission=repr(permission)[:_MAX_LOGGED_PERMISSION],
                )
                return False

    @staticmethod
    def parse(raw: Any) -> Option[WorkspaceRole]:
        """Resolve a wire value (``"owner"``, ``"admin"``, …) to a role.

        Exact match only. Callers choose their own fallback, typically the
        least privileged role::

            role = WorkspaceRole.parse(payload.get("role")).unwrap_or(WorkspaceRole.VIEWER)
        """
        if not isinstance(raw, str):
            return Nothing()
        role = _BY_VALUE.get(raw)
        if role is None:
            return Nothing()
        return Some(role)

    @staticmethod
    def values() -> tuple[str, ...]:
        """Return the wire values of all roles, for request validation."""
        return tuple(_BY_VALUE)


_LABELS: MappingProxyType[WorkspaceRole, str] = MappingProxyType({
    WorkspaceRole.OWNER: "Owner",
    WorkspaceRole.ADMIN: "Admin",
    WorkspaceRole.EDITOR: "Editor",
    WorkspaceRole.VIEWER: "Viewer",
})

_RANKS: MappingProxyType[WorkspaceRole, int] = MappingProxyType({
    WorkspaceRole.VIEWER: 1,
    WorkspaceRole.EDITOR: 2,
    WorkspaceRole.ADMIN: 3,
    WorkspaceRole.OWNER: 4,
})

_BY_VALUE: MappingProxyType[str, WorkspaceRole] = MappingProxyType(
    {r.value: r for r in WorkspaceRole}
)

OWNER_ONLY_PERMISSIONS: frozenset[Permission] = frozenset({
    Permission.WORKSPACE_DELETE,
    Permission.BILLING_SUBSCRIPTION_MANAGE,
    Permission.BILLING_PAYMENT_MANAGE,
    Permission.SETTINGS_API_KEYS_MANAGE,
})

_EDITOR_PERMISSIONS: frozenset[Permission] = frozenset({
    # workspace: view members/teams/accounts only
    Permission.WORKSPACE_MEMBERS_VIEW,
    Permission.WORKSPACE_TEAMS_VIEW,
    Permission.WORKSPACE_SOCIAL_ACCOUNTS_VIEW,
    # content: create, submit, schedule; no approve/publish/delete/edit_any
    Permission.CONTENT_POSTS_VIEW,
    Permission.CONTENT_POSTS_CREATE,
    Permission.CONTENT_POSTS_SUBMIT,
    Permission.CONTENT_POSTS_SCHEDULE,
    Permission.CONTENT_CALENDAR_VIEW,
    Permission.CONTENT_CALENDAR_MANAGE,
    Permission.CONTENT_MEDIA_VIEW,
    Permission.CONTENT_MEDIA_UPLOAD,
    Permission.CONTENT_CATEGORIES_VIEW,
    # inbox: view + reply, saved replies; no assign/resolve/archive
    Permission.INBOX_ITEMS_VIEW,
    Permission.INBOX_ITEMS_REPLY,
    Permission.INBOX_CONTACTS_VIEW,
    Permission.INBOX_SAVED_REPLIES_VIEW,
    Permission.INBOX_SAVED_REPLIES_MANAGE,
    # whatsapp: view + reply, contacts manage
    Permission.WHATSAPP_CONVERSATIONS_VIEW,
    Permission.WHATSAPP_CONVERSATIONS_REPLY,
    Permission.WHATSAPP_TEMPLATES_VIEW,
    Permission.WHATSAPP_CAMPAIGNS_VIEW,
    Permission.WHATSAPP_CONTACTS_VIEW,
    Permission.WHATSAPP_CONTACTS_MANAGE,
    # analytics: full
    Permission.ANALYTICS_DASHBOARD_VIEW,
    Permission.ANALYTICS_REPORTS_VIEW,
    Permission.ANALYTICS_REPORTS_CREATE,
    Permission.ANALYTICS_REPORTS_EXPORT,
    Permission.ANALYTICS_DEMOGRAPHICS_VIEW,
    Permission.ANALYTICS_HASHTAGS_VIEW,
    # ai
    Permission.AI_ASSIST_USE,
})

_VIEWER_PERMISSIONS: frozenset[Permission] = frozenset({
    Permission.WORKSPACE_MEMBERS_VIEW,
    Permission.WORKSPACE_TEAMS_VIEW,
    Permission.WORKSPACE_SOCIAL_ACCOUNTS_VIEW,
    Permission.CONTENT_POSTS_VIEW,
    Permission.CONTENT_CALENDAR_VIEW,
    Permission.CONTENT_MEDIA_VIEW,
    Permission.CONTENT_CATEGORIES_VIEW,
    Permission.INBOX_ITEMS_VIEW,
    Permission.INBOX_CONTACTS_VIEW,
    Permission.INBOX_SAVED_REPLIES_VIEW,
    Permission.WHATSAPP_CONVERSATIONS_VIEW,
    Permission.WHATSAPP_TEMPLATES_VIEW,
    Permission.WHATSAPP_CAMPAIGNS_VIEW,
    Permission.WHATSAPP_CONTACTS_VIEW,
    Permission.ANALYTICS_DASHBOARD_VIEW,
    Permission.ANALYTICS_REPORTS_VIEW,
    Permission.ANALYTICS_DEMOGRAPHICS_VIEW,
    Permission.ANALYTICS_HASHTAGS_VIEW,
})

_GRANTS: MappingProxyType[WorkspaceRole, frozenset[Permission]] = MappingProxyType({
    WorkspaceRole.OWNER: PermissionCatalog.all_permissions(),
    WorkspaceRole.ADMIN: PermissionCatalog.all_permissions() - OWNER_ONLY_PERMISSIONS,
    WorkspaceRole.EDITOR: _EDITOR_PERMISSIONS,
    WorkspaceRole.VIEWER: _VIEWER_PERMISSIONS,
})


__all__ = ["OWNER_ONLY_PERMISSIONS", "WorkspaceRole"]
