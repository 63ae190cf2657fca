"""
workspace_rbac – role-based access control for multi-tenant workspaces.

Import path convention::

    from workspace_rbac.security import Permission, PermissionCatalog, WorkspaceRole
    from workspace_rbac.security import WorkspaceMembership, require_permission
    from workspace_rbac.config.settings import load_settings
    from workspace_rbac.observability.logging import configure_logging
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
