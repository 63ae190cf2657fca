"""Testing helpers for applications that embed workspace_rbac."""
