"""Application todos – commands, storage and owner ports, and the guarded service."""
from todo_abac.application.todos.commands import CreateTodo, UpdateTodo
from todo_abac.application.todos.owners import (
    UNKNOWN_OWNER,
    InMemoryOwnerDirectory,
    OwnerDirectory,
    OwnerInfo,
)
from todo_abac.application.todos.repository import InMemoryTodoRepository, TodoRepository
from todo_abac.application.todos.service import TodoService

__all__ = [
    "CreateTodo",
    "InMemoryOwnerDirectory",
    "InMemoryTodoRepository",
    "OwnerDirectory",
    "OwnerInfo",
    "TodoRepository",
    "TodoService",
    "UNKNOWN_OWNER",
    "UpdateTodo",
]
