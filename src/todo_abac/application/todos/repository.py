"""Application todos – TodoRepository port and InMemoryTodoRepository."""

from __future__ import annotations

import abc

from todo_abac.kernel.todos.models import Todo


class TodoRepository(abc.ABC):
    """Port — todo storage.

    The access policy never talks to storage; the service loads records
    through this port and consults the guard before any mutation.
    """

    @abc.abstractmethod
    async def list_all(self) -> list[Todo]:
        """Return every todo, newest first."""

    @abc.abstractmethod
    async def get(self, todo_id: str) -> Todo | None: ...

    @abc.abstractmethod
    async def add(self, todo: Todo) -> None: ...

    @abc.abstractmethod
    async def save(self, todo: Todo) -> None: ...

    @abc.abstractmethod
    async def delete(self, todo_id: str) -> None: ...


class InMemoryTodoRepository(TodoRepository):
    """Dict-backed repository for unit tests and local development."""

    def __init__(self, todos: list[Todo] | None = None) -> None:
        self._records: dict[str, Todo] = {t.id: t for t in todos or []}

    async def list_all(self) -> list[Todo]:
        return sorted(self._records.values(), key=lambda t: t.created_at, reverse=True)

    async def get(self, todo_id: str) -> Todo | None:
        return self._records.get(todo_id)

    async def add(self, todo: Todo) -> None:
        self._records[todo.id] = todo

    async def save(self, todo: Todo) -> None:
        self._records[todo.id] = todo

    async def delete(self, todo_id: str) -> None:
        self._records.pop(todo_id, None)

    def all(self) -> list[Todo]:
        """Return stored todos in insertion order (helper for test assertions)."""
        return list(self._records.values())


__all__ = ["InMemoryTodoRepository", "TodoRepository"]
