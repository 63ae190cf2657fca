"""Kernel value types — public re-export surface."""

from workspace_rbac.kernel.types.option import Nothing, Option, Some

__all__ = ["Nothing", "Option", "Some"]
