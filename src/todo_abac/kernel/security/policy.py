"""Kernel security – the todo access policy.

A fixed decision table over (role, operation, ownership, status)::

    operation   user                      manager   admin
    ---------   -----------------------   -------   -----
    view        owner                     yes       yes
    create      yes                       no        no
    update      owner                     no        no
    delete      owner and status=draft    no        yes

Any role outside :class:`Role` is denied every operation.  Every function is
pure and returns a ``bool`` (or :class:`PolicyDecision`); none of them raise
for a denial.
"""
from __future__ import annotations

from enum import Enum

from todo_abac.kernel.security.actor import Actor, Role
from todo_abac.kernel.todos.models import Todo, TodoStatus


class PolicyDecision(str, Enum):
    ALLOW = "ALLOW"
    DENY = "DENY"

    @classmethod
    def of(cls, allowed: bool) -> "PolicyDecision":
        return cls.ALLOW if allowed else cls.DENY

    @property
    def allowed(self) -> bool:
        return self is PolicyDecision.ALLOW


class Operation(str, Enum):
    """Operations gated by the policy."""

    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"

    @classmethod
    def parse(cls, raw: object) -> "Operation | None":
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


def can_view(actor: Actor, todo: Todo) -> bool:
    """Users see their own todos; managers and admins see every todo."""
    match actor.role:
        case Role.USER:
            return todo.owner_id == actor.id
        case Role.MANAGER | Role.ADMIN:
            return True
        case _:
            return False


def can_create(actor: Actor) -> bool:
    """Only users create todos."""
    match actor.role:
        case Role.USER:
            return True
        case _:
            return False


def can_update(actor: Actor, todo: Todo) -> bool:
    """Only the owning user updates a todo, whatever its status."""
    match actor.role:
        case Role.USER:
            return todo.owner_id == actor.id
        case _:
            return False


def can_delete(actor: Actor, todo: Todo) -> bool:
    """Admins delete anything; a user deletes their own todo while it is a draft."""
    match actor.role:
        case Role.ADMIN:
            return True
        case Role.USER:
            return todo.owner_id == actor.id and todo.status == TodoStatus.DRAFT
        case _:
            # managers included, even for a todo they own
            return False


def is_allowed(operation: Operation | str, actor: Actor, todo: Todo | None = None) -> bool:
    """Dispatch *operation* to its rule.

    ``create`` ignores *todo*.  The other operations deny when *todo* is
    ``None``; callers are expected to report a missing record themselves.
    """
    op = Operation.parse(operation)
    if op is Operation.CREATE:
        return can_create(actor)
    if todo is None:
        return False
    match op:
        case Operation.VIEW:
            return can_view(actor, todo)
        case Operation.UPDATE:
            return can_update(actor, todo)
        case Operation.DELETE:
            return can_delete(actor, todo)
        case _:
            return False


def evaluate(operation: Operation | str, actor: Actor, todo: Todo | None = None) -> PolicyDecision:
    """Same as :func:`is_allowed`, returned as a :class:`PolicyDecision`."""
    return PolicyDecision.of(is_allowed(operation, actor, todo))


__all__ = [
    "Operation",
    "PolicyDecision",
    "can_create",
    "can_delete",
    "can_update",
    "can_view",
    "evaluate",
    "is_allowed",
]
