"""Kernel todos – the protected record and its status."""
from todo_abac.kernel.todos.models import Todo, TodoStatus

__all__ = ["Todo", "TodoStatus"]
