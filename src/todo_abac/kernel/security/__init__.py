"""Kernel security – Actor, Role, the todo access policy and visibility filter."""
from todo_abac.kernel.security.actor import Actor, Role
from todo_abac.kernel.security.policy import (
    Operation,
    PolicyDecision,
    can_create,
    can_delete,
    can_update,
    can_view,
    evaluate,
    is_allowed,
)
from todo_abac.kernel.security.security_context import ActorContext
from todo_abac.kernel.security.visibility import filter_visible

__all__ = [
    "Actor",
    "ActorContext",
    "Operation",
    "PolicyDecision",
    "Role",
    "can_create",
    "can_delete",
    "can_update",
    "can_view",
    "evaluate",
    "filter_visible",
    "is_allowed",
]
