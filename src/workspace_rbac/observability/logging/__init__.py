"""Observability – structlog configuration, processors and audit sink."""
from workspace_rbac.observability.logging.audit import AuditLogger, AuditOutcome, build_audit_logger
from workspace_rbac.observability.logging.factory import JsonLoggerFactory, configure_logging
from workspace_rbac.observability.logging.processors import MembershipContextProcessor, get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "MembershipContextProcessor",
    "build_audit_logger",
    "configure_logging",
    "get_logger",
]
