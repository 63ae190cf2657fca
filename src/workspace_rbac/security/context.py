"""Security – MembershipContext using contextvars."""

from __future__ import annotations

import contextvars

from workspace_rbac.kernel.errors import UnauthorizedError
from workspace_rbac.security.membership import WorkspaceMembership

_VAR: contextvars.ContextVar[WorkspaceMembership | None] = contextvars.ContextVar(
    "_membership_context", default=None
)


class MembershipContext:
    """Store and retrieve the acting :class:`WorkspaceMembership` via
    :mod:`contextvars` so each asyncio task has its own isolated context."""

    @staticmethod
    def get_current() -> WorkspaceMembership | None:
        """Return the current membership, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(
        membership: WorkspaceMembership,
    ) -> contextvars.Token[WorkspaceMembership | None]:
        """Set the current membership and return a reset token."""
        return _VAR.set(membership)

    @staticmethod
    def reset(token: contextvars.Token[WorkspaceMembership | None]) -> None:
        """Restore the value that was current before :meth:`set_current`."""
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current membership from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> WorkspaceMembership:
        """Return the current membership or raise ``UnauthorizedError``."""
        membership = _VAR.get()
        if membership is None:
            raise UnauthorizedError("No workspace membership in context")
        return membership


__all__ = ["MembershipContext"]
