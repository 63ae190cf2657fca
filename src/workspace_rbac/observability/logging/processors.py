"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class MembershipContextProcessor:
    """structlog processor that injects the current workspace membership.

    Adds ``workspace_id``, ``user_id`` and ``role`` when a membership is bound
    through :class:`~workspace_rbac.security.context.MembershipContext`.
    Fields already present on the event are left untouched.

    Usage::

        structlog.configure(processors=[MembershipContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        from workspace_rbac.security.context import MembershipContext

        membership = MembershipContext.get_current()
        if membership is not None:
            event_dict.setdefault("workspace_id", membership.workspace_id)
            event_dict.setdefault("user_id", membership.user_id)
            event_dict.setdefault("role", membership.role.value)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["MembershipContextProcessor", "get_logger"]
