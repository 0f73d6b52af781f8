"""Application todos – TodoService.

Every use case follows the same order: require an actor, load the record
(reporting a missing one as not found), ask the guard, and only then touch
storage.
"""

from __future__ import annotations

import uuid
from typing import Any, Callable, Mapping

from todo_abac.application.access import AccessGuard
from todo_abac.application.todos.commands import CreateTodo, UpdateTodo
from todo_abac.application.todos.owners import UNKNOWN_OWNER, OwnerDirectory, OwnerInfo
from todo_abac.application.todos.repository import TodoRepository
from todo_abac.kernel.errors import NotFoundError
from todo_abac.kernel.security.actor import Actor
from todo_abac.kernel.security.policy import Operation
from todo_abac.kernel.time import Clock, SystemClock
from todo_abac.kernel.todos.models import Todo
from todo_abac.observability.logging import get_logger

_log = get_logger(__name__)


def _new_id() -> str:
    return str(uuid.uuid4())


class TodoService:
    """Todo use cases guarded by the access policy.

    Parameters
    ----------
    repository:
        Storage port.
    guard:
        Policy enforcement; defaults to an auditing :class:`AccessGuard`.
    clock:
        Source of ``created_at`` / ``updated_at`` timestamps.
    id_factory:
        Generates ids for new todos (UUID4 strings by default).
    owners:
        Display details for listed todos; without one every owner is
        reported as unknown.
    """

    def __init__(
        self,
        repository: TodoRepository,
        guard: AccessGuard | None = None,
        clock: Clock | None = None,
        id_factory: Callable[[], str] = _new_id,
        owners: OwnerDirectory | None = None,
    ) -> None:
        self._repository = repository
        self._guard = guard or AccessGuard()
        self._clock = clock or SystemClock()
        self._id_factory = id_factory
        self._owners = owners

    async def list_todos(self, actor: Actor | None) -> list[Todo]:
        """Return the todos *actor* may see, newest first."""
        actor = self._guard.require_actor(actor)
        todos = await self._repository.list_all()
        return self._guard.visible(actor, todos)

    async def list_todos_with_owners(self, actor: Actor | None) -> list[tuple[Todo, OwnerInfo]]:
        """Like :meth:`list_todos`, pairing each todo with its owner's details.

        Only owners of visible todos are looked up.
        """
        todos = await self.list_todos(actor)
        known: dict[str, OwnerInfo] = {}
        if self._owners is not None and todos:
            known = dict(await self._owners.lookup({t.owner_id for t in todos}))
        return [(t, known.get(t.owner_id, UNKNOWN_OWNER)) for t in todos]

    async def get_todo(self, actor: Actor | None, todo_id: str) -> Todo:
        actor = self._guard.require_actor(actor)
        todo = await self._load(todo_id)
        self._guard.enforce(Operation.VIEW, actor, todo)
        return todo

    async def create_todo(
        self,
        actor: Actor | None,
        command: CreateTodo | Mapping[str, Any] | None,
    ) -> Todo:
        actor = self._guard.require_actor(actor)
        self._guard.enforce(Operation.CREATE, actor)
        if not isinstance(command, CreateTodo):
            command = CreateTodo.from_payload(command)

        todo = Todo(
            id=self._id_factory(),
            owner_id=actor.id,
            status=command.status,
            title=command.title,
            description=command.description,
            created_at=self._clock.now(),
        )
        await self._repository.add(todo)
        _log.info("todo.created", todo_id=todo.id, owner_id=actor.id)
        return todo

    async def update_todo(
        self,
        actor: Actor | None,
        todo_id: str,
        command: UpdateTodo | Mapping[str, Any] | None,
    ) -> Todo:
        actor = self._guard.require_actor(actor)
        todo = await self._load(todo_id)
        self._guard.enforce(Operation.UPDATE, actor, todo)
        if not isinstance(command, UpdateTodo):
            command = UpdateTodo.from_payload(command)

        updated = command.apply_to(todo, self._clock.now())
        await self._repository.save(updated)
        _log.info("todo.updated", todo_id=todo.id, actor_id=actor.id)
        return updated

    async def delete_todo(self, actor: Actor | None, todo_id: str) -> None:
        actor = self._guard.require_actor(actor)
        todo = await self._load(todo_id)
        self._guard.enforce(Operation.DELETE, actor, todo)
        await self._repository.delete(todo.id)
        _log.info("todo.deleted", todo_id=todo.id, actor_id=actor.id)

    async def _load(self, todo_id: str) -> Todo:
        todo = await self._repository.get(todo_id)
        if todo is None:
            raise NotFoundError("Todo", todo_id)
        return todo


__all__ = ["TodoService"]
