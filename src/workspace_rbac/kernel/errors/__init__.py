"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    WorkspaceRbacError          (base.py)
    ├── UnauthorizedError       (enforcement.py)
    ├── ForbiddenError          (enforcement.py)
    └── ConfigError             (config/validation)
        └── InvalidSettingValueError
"""

from workspace_rbac.kernel.errors.base import WorkspaceRbacError
from workspace_rbac.kernel.errors.enforcement import ForbiddenError, UnauthorizedError

__all__ = [
    "ForbiddenError",
    "UnauthorizedError",
    "WorkspaceRbacError",
]
