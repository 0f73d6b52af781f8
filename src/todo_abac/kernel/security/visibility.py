"""Kernel security – visibility filtering of todo collections."""
from __future__ import annotations

from typing import Iterable

from todo_abac.kernel.security.actor import Actor
from todo_abac.kernel.security.policy import can_view
from todo_abac.kernel.todos.models import Todo


def filter_visible(actor: Actor, todos: Iterable[Todo]) -> list[Todo]:
    """Return the todos *actor* may view, in their original order.

    No sorting, de-duplication or pagination is applied.
    """
    return [todo for todo in todos if can_view(actor, todo)]


__all__ = ["filter_visible"]
