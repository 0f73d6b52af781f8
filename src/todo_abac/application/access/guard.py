"""Application access – AccessGuard.

Sits between the request handler and storage: callers load the record, ask
the guard, and only then mutate.  A denial surfaces as
:class:`~todo_abac.kernel.errors.ForbiddenError` with a generic message.
"""

from __future__ import annotations

from typing import Iterable

from todo_abac.kernel.errors import ForbiddenError, UnauthorizedError
from todo_abac.kernel.security.actor import Actor
from todo_abac.kernel.security.policy import Operation, PolicyDecision, evaluate
from todo_abac.kernel.security.visibility import filter_visible
from todo_abac.kernel.todos.models import Todo
from todo_abac.observability.logging import AuditLogger, AuditOutcome, get_logger

_log = get_logger(__name__)


class AccessGuard:
    """Evaluate the todo policy and record every decision.

    Parameters
    ----------
    audit_logger:
        Sink for ``audit.access`` entries.  Defaults to a fresh
        :class:`AuditLogger`.
    audit_decisions:
        When ``False`` decisions are still evaluated but not audited.
    """

    def __init__(
        self,
        audit_logger: AuditLogger | None = None,
        *,
        audit_decisions: bool = True,
    ) -> None:
        self._audit = audit_logger or AuditLogger()
        self._audit_decisions = audit_decisions

    def require_actor(self, actor: Actor | None) -> Actor:
        """Return *actor* or raise ``UnauthorizedError`` when there is none."""
        if actor is None:
            self._audit.log_security_event(
                "unauthenticated", description="request without an authenticated actor"
            )
            raise UnauthorizedError()
        return actor

    def check(
        self,
        operation: Operation | str,
        actor: Actor,
        todo: Todo | None = None,
    ) -> PolicyDecision:
        decision = evaluate(operation, actor, todo)
        if self._audit_decisions:
            action = operation.value if isinstance(operation, Operation) else str(operation)
            self._audit.log_access(
                actor,
                resource=f"todo:{todo.id}" if todo is not None else "todo",
                action=action,
                outcome=AuditOutcome.SUCCESS if decision.allowed else AuditOutcome.DENIED,
            )
        return decision

    def enforce(
        self,
        operation: Operation | str,
        actor: Actor,
        todo: Todo | None = None,
    ) -> None:
        """Raise ``ForbiddenError`` unless *actor* may perform *operation*."""
        if not self.check(operation, actor, todo).allowed:
            op = Operation.parse(operation)
            raise ForbiddenError(operation=op.value if op is not None else None)

    def visible(self, actor: Actor, todos: Iterable[Todo]) -> list[Todo]:
        candidates = list(todos)
        result = filter_visible(actor, candidates)
        _log.debug(
            "todos.filtered",
            actor_id=actor.id,
            candidates=len(candidates),
            visible=len(result),
        )
        return result


__all__ = ["AccessGuard"]
