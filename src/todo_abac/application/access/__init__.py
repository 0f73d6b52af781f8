"""Application access – policy enforcement for request handlers."""
from todo_abac.application.access.guard import AccessGuard

__all__ = ["AccessGuard"]
