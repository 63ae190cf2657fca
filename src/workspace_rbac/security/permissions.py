"""Security — the closed workspace permission catalog.

Every permission is a dot-delimited identifier ``domain.resource.action``
(``workspace.delete`` is the one two-segment identifier). The identifiers
are wire-visible: they travel in request bodies and are persisted in
membership records, so renaming any of them is a breaking change.

64 permissions across 8 domains:

* ``workspace`` (10) — settings, members, teams, social accounts, audit, delete
* ``content`` (15) — posts, approval, publishing, calendar, media, categories
* ``inbox`` (11) — items, contacts, automation, saved replies
* ``whatsapp`` (11) — conversations, templates, campaigns, contacts, automation, setup
* ``analytics`` (6) — dashboard, reports, demographics, hashtags
* ``billing`` (4) — subscription, invoices, payment
* ``settings`` (6) — security, webhooks, API keys
* ``ai`` (1) — assist

Untrusted strings must go through :meth:`PermissionCatalog.parse`, which
returns :class:`~workspace_rbac.kernel.types.Nothing` for anything outside
the catalog. Nothing is normalised: case, whitespace and empty strings all
miss.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any

from workspace_rbac.kernel.types.option import Nothing, Option, Some


class Permission(str, Enum):
    """A workspace-scoped capability identifier."""

    # ── workspace ──────────────────────────────────────────────────────
    WORKSPACE_SETTINGS_VIEW = "workspace.settings.view"
    WORKSPACE_SETTINGS_UPDATE = "workspace.settings.update"
    WORKSPACE_MEMBERS_VIEW = "workspace.members.view"
    WORKSPACE_MEMBERS_MANAGE = "workspace.members.manage"
    WORKSPACE_TEAMS_VIEW = "workspace.teams.view"
    WORKSPACE_TEAMS_MANAGE = "workspace.teams.manage"
    WORKSPACE_SOCIAL_ACCOUNTS_VIEW = "workspace.social_accounts.view"
    WORKSPACE_SOCIAL_ACCOUNTS_MANAGE = "workspace.social_accounts.manage"
    WORKSPACE_AUDIT_VIEW = "workspace.audit.view"
    WORKSPACE_DELETE = "workspace.delete"

    # ── content ────────────────────────────────────────────────────────
    CONTENT_POSTS_VIEW = "content.posts.view"
    CONTENT_POSTS_CREATE = "content.posts.create"
    CONTENT_POSTS_EDIT_ANY = "content.posts.edit_any"
    CONTENT_POSTS_DELETE = "content.posts.delete"
    CONTENT_POSTS_SUBMIT = "content.posts.submit"
    CONTENT_POSTS_APPROVE = "content.posts.approve"
    CONTENT_POSTS_PUBLISH = "content.posts.publish"
    CONTENT_POSTS_SCHEDULE = "content.posts.schedule"
    CONTENT_CALENDAR_VIEW = "content.calendar.view"
    CONTENT_CALENDAR_MANAGE = "content.calendar.manage"
    CONTENT_MEDIA_VIEW = "content.media.view"
    CONTENT_MEDIA_UPLOAD = "content.media.upload"
    CONTENT_MEDIA_DELETE = "content.media.delete"
    CONTENT_CATEGORIES_VIEW = "content.categories.view"
    CONTENT_CATEGORIES_MANAGE = "content.categories.manage"

    # ── inbox ──────────────────────────────────────────────────────────
    INBOX_ITEMS_VIEW = "inbox.items.view"
    INBOX_ITEMS_REPLY = "inbox.items.reply"
    INBOX_ITEMS_ASSIGN = "inbox.items.assign"
    INBOX_ITEMS_RESOLVE = "inbox.items.resolve"
    INBOX_ITEMS_ARCHIVE = "inbox.items.archive"
    INBOX_CONTACTS_VIEW = "inbox.contacts.view"
    INBOX_CONTACTS_MANAGE = "inbox.contacts.manage"
    INBOX_AUTOMATION_VIEW = "inbox.automation.view"
    INBOX_AUTOMATION_MANAGE = "inbox.automation.manage"
    INBOX_SAVED_REPLIES_VIEW = "inbox.saved_replies.view"
    INBOX_SAVED_REPLIES_MANAGE = "inbox.saved_replies.manage"

    # ── whatsapp ───────────────────────────────────────────────────────
    WHATSAPP_CONVERSATIONS_VIEW = "whatsapp.conversations.view"
    WHATSAPP_CONVERSATIONS_REPLY = "whatsapp.conversations.reply"
    WHATSAPP_TEMPLATES_VIEW = "whatsapp.templates.view"
    WHATSAPP_TEMPLATES_MANAGE = "whatsapp.templates.manage"
    WHATSAPP_CAMPAIGNS_VIEW = "whatsapp.campaigns.view"
    WHATSAPP_CAMPAIGNS_MANAGE = "whatsapp.campaigns.manage"
    WHATSAPP_CONTACTS_VIEW = "whatsapp.contacts.view"
    WHATSAPP_CONTACTS_MANAGE = "whatsapp.contacts.manage"
    WHATSAPP_AUTOMATION_VIEW = "whatsapp.automation.view"
    WHATSAPP_AUTOMATION_MANAGE = "whatsapp.automation.manage"
    WHATSAPP_SETUP_MANAGE = "whatsapp.setup.manage"

    # ── analytics ──────────────────────────────────────────────────────
    ANALYTICS_DASHBOARD_VIEW = "analytics.dashboard.view"
    ANALYTICS_REPORTS_VIEW = "analytics.reports.view"
    ANALYTICS_REPORTS_CREATE = "analytics.reports.create"
    ANALYTICS_REPORTS_EXPORT = "analytics.reports.export"
    ANALYTICS_DEMOGRAPHICS_VIEW = "analytics.demographics.view"
    ANALYTICS_HASHTAGS_VIEW = "analytics.hashtags.view"

    # ── billing ────────────────────────────────────────────────────────
    BILLING_SUBSCRIPTION_VIEW = "billing.subscription.view"
    BILLING_SUBSCRIPTION_MANAGE = "billing.subscription.manage"
    BILLING_INVOICES_VIEW = "billing.invoices.view"
    BILLING_PAYMENT_MANAGE = "billing.payment.manage"

    # ── settings ───────────────────────────────────────────────────────
    SETTINGS_SECURITY_VIEW = "settings.security.view"
    SETTINGS_SECURITY_MANAGE = "settings.security.manage"
    SETTINGS_WEBHOOKS_VIEW = "settings.webhooks.view"
    SETTINGS_WEBHOOKS_MANAGE = "settings.webhooks.manage"
    SETTINGS_API_KEYS_VIEW = "settings.api_keys.view"
    SETTINGS_API_KEYS_MANAGE = "settings.api_keys.manage"

    # ── ai ─────────────────────────────────────────────────────────────
    AI_ASSIST_USE = "ai.assist.use"

    def __str__(self) -> str:
        return self.value

    @property
    def domain(self) -> str:
        """First segment of the identifier, e.g. ``"content"``."""
        return self.value.split(".", 1)[0]

    @property
    def action(self) -> str:
        """Everything after the domain, e.g. ``"posts.approve"``."""
        return self.value.split(".", 1)[1]

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: MappingProxyType[Permission, str] = MappingProxyType({
    # workspace
    Permission.WORKSPACE_SETTINGS_VIEW: "View workspace settings",
    Permission.WORKSPACE_SETTINGS_UPDATE: "Update workspace settings",
    Permission.WORKSPACE_MEMBERS_VIEW: "View member list",
    Permission.WORKSPACE_MEMBERS_MANAGE: "Add/remove members, change roles",
    Permission.WORKSPACE_TEAMS_VIEW: "View teams and team members",
    Permission.WORKSPACE_TEAMS_MANAGE: "Create/update/delete teams, manage team members",
    Permission.WORKSPACE_SOCIAL_ACCOUNTS_VIEW: "View connected social accounts",
    Permission.WORKSPACE_SOCIAL_ACCOUNTS_MANAGE: "Connect/disconnect social accounts",
    Permission.WORKSPACE_AUDIT_VIEW: "View audit log",
    Permission.WORKSPACE_DELETE: "Delete workspace",
    # content
    Permission.CONTENT_POSTS_VIEW: "View posts",
    Permission.CONTENT_POSTS_CREATE: "Create and edit own posts",
    Permission.CONTENT_POSTS_EDIT_ANY: "Edit any post (not just own)",
    Permission.CONTENT_POSTS_DELETE: "Delete posts",
    Permission.CONTENT_POSTS_SUBMIT: "Submit post for approval",
    Permission.CONTENT_POSTS_APPROVE: "Approve/reject submitted posts",
    Permission.CONTENT_POSTS_PUBLISH: "Publish directly (bypass approval)",
    Permission.CONTENT_POSTS_SCHEDULE: "Schedule posts for future publish",
    Permission.CONTENT_CALENDAR_VIEW: "View content calendar",
    Permission.CONTENT_CALENDAR_MANAGE: "Reschedule/cancel scheduled posts",
    Permission.CONTENT_MEDIA_VIEW: "View media library",
    Permission.CONTENT_MEDIA_UPLOAD: "Upload media",
    Permission.CONTENT_MEDIA_DELETE: "Delete media",
    Permission.CONTENT_CATEGORIES_VIEW: "View categories and hashtag groups",
    Permission.CONTENT_CATEGORIES_MANAGE: "Create/update/delete categories",
    # inbox
    Permission.INBOX_ITEMS_VIEW: "View inbox items",
    Permission.INBOX_ITEMS_REPLY: "Reply to inbox items",
    Permission.INBOX_ITEMS_ASSIGN: "Assign items to users",
    Permission.INBOX_ITEMS_RESOLVE: "Mark items resolved/unresolve",
    Permission.INBOX_ITEMS_ARCHIVE: "Archive items",
    Permission.INBOX_CONTACTS_VIEW: "View inbox contacts",
    Permission.INBOX_CONTACTS_MANAGE: "Edit contact details",
    Permission.INBOX_AUTOMATION_VIEW: "View automation rules",
    Permission.INBOX_AUTOMATION_MANAGE: "Create/edit/delete automation rules",
    Permission.INBOX_SAVED_REPLIES_VIEW: "View saved replies",
    Permission.INBOX_SAVED_REPLIES_MANAGE: "Create/edit/delete saved replies",
    # whatsapp
    Permission.WHATSAPP_CONVERSATIONS_VIEW: "View conversations",
    Permission.WHATSAPP_CONVERSATIONS_REPLY: "Reply to conversations",
    Permission.WHATSAPP_TEMPLATES_VIEW: "View message templates",
    Permission.WHATSAPP_TEMPLATES_MANAGE: "Create/edit/delete templates",
    Permission.WHATSAPP_CAMPAIGNS_VIEW: "View campaigns",
    Permission.WHATSAPP_CAMPAIGNS_MANAGE: "Create/edit/send campaigns",
    Permission.WHATSAPP_CONTACTS_VIEW: "View contacts",
    Permission.WHATSAPP_CONTACTS_MANAGE: "Import/export/edit contacts",
    Permission.WHATSAPP_AUTOMATION_VIEW: "View automation/quick replies",
    Permission.WHATSAPP_AUTOMATION_MANAGE: "Manage automation rules",
    Permission.WHATSAPP_SETUP_MANAGE: "Configure WhatsApp account",
    # analytics
    Permission.ANALYTICS_DASHBOARD_VIEW: "View analytics dashboard",
    Permission.ANALYTICS_REPORTS_VIEW: "View reports",
    Permission.ANALYTICS_REPORTS_CREATE: "Create custom/scheduled reports",
    Permission.ANALYTICS_REPORTS_EXPORT: "Export reports",
    Permission.ANALYTICS_DEMOGRAPHICS_VIEW: "View audience demographics",
    Permission.ANALYTICS_HASHTAGS_VIEW: "View hashtag tracking",
    # billing
    Permission.BILLING_SUBSCRIPTION_VIEW: "View subscription details",
    Permission.BILLING_SUBSCRIPTION_MANAGE: "Change plan, cancel, reactivate",
    Permission.BILLING_INVOICES_VIEW: "View invoices",
    Permission.BILLING_PAYMENT_MANAGE: "Update payment method",
    # settings
    Permission.SETTINGS_SECURITY_VIEW: "View security settings",
    Permission.SETTINGS_SECURITY_MANAGE: "Update security settings",
    Permission.SETTINGS_WEBHOOKS_VIEW: "View webhooks",
    Permission.SETTINGS_WEBHOOKS_MANAGE: "Create/edit/delete webhooks",
    Permission.SETTINGS_API_KEYS_VIEW: "View API keys",
    Permission.SETTINGS_API_KEYS_MANAGE: "Create/revoke API keys",
    # ai
    Permission.AI_ASSIST_USE: "Use AI assist features",
})

# Lookup tables, built once at import and never mutated.
_ALL: frozenset[Permission] = frozenset(Permission)
_BY_VALUE: MappingProxyType[str, Permission] = MappingProxyType(
    {p.value: p for p in Permission}
)
_DOMAINS: tuple[str, ...] = tuple(dict.fromkeys(p.domain for p in Permission))
_BY_DOMAIN: MappingProxyType[str, frozenset[Permission]] = MappingProxyType({
    domain: frozenset(p for p in Permission if p.domain == domain)
    for domain in _DOMAINS
})


class PermissionCatalog:
    """Read-only queries over the closed :class:`Permission` vocabulary.

    Example::

        match PermissionCatalog.parse(request_body["permission"]):
            case Some(value=permission):
                allowed = membership.has_permission(permission)
            case Nothing():
                allowed = False
    """

    @staticmethod
    def all_permissions() -> frozenset[Permission]:
        """Return every defined permission.

        For a stable listing iterate :class:`Permission` directly or use
        :meth:`values`.
        """
        return _ALL

    @staticmethod
    def values() -> tuple[str, ...]:
        """Return every identifier in definition order."""
        return tuple(_BY_VALUE)

    @staticmethod
    def domain_of(permission: Permission) -> str:
        return permission.domain

    @staticmethod
    def action_of(permission: Permission) -> str:
        return permission.action

    @staticmethod
    def describe(permission: Permission) -> str:
        return permission.description

    @staticmethod
    def parse(raw: Any) -> Option[Permission]:
        """Resolve *raw* against the catalog by exact, case-sensitive equality.

        Never raises: non-string input and unknown identifiers both yield
        ``Nothing()``.
        """
        if not isinstance(raw, str):
            return Nothing()
        permission = _BY_VALUE.get(raw)
        if permission is None:
            return Nothing()
        return Some(permission)

    @staticmethod
    def permissions_in_domain(domain: str) -> frozenset[Permission]:
        """Return the permissions whose domain is *domain* (empty if unknown)."""
        return _BY_DOMAIN.get(domain, frozenset())

    @staticmethod
    def all_domains() -> tuple[str, ...]:
        """Return the distinct domains in first-seen order."""
        return _DOMAINS


__all__ = ["Permission", "PermissionCatalog"]
