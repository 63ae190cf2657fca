"""Root error class shared by enforcement and configuration failures."""

from __future__ import annotations

from typing import Any, ClassVar


class WorkspaceRbacError(Exception):
    """Root of the workspace-rbac error hierarchy.

    ``str(err)`` is the human-readable message; :meth:`to_dict` is the
    structured form handed to loggers and HTTP error handlers. Wrap lower
    level failures with ``raise ... from exc`` so the cause stays chained.

    Args:
        message: Human-readable description.
        workspace_id: Workspace the failure relates to, when one is known.
    """

    code: ClassVar[str] = "workspace_rbac_error"

    def __init__(self, message: str, *, workspace_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.workspace_id = workspace_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.workspace_id is not None:
            payload["workspace_id"] = self.workspace_id
        return payload


__all__ = ["WorkspaceRbacError"]
