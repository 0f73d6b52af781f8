"""Testing fixtures – load with ``pytest_plugins = ["todo_abac.testing.fixtures"]``."""
from todo_abac.testing.fixtures.actors import (
    actor_context,
    admin_actor,
    manager_actor,
    other_user_actor,
    user_actor,
)
from todo_abac.testing.fixtures.todos import (
    access_guard,
    audit_log,
    frozen_clock,
    todo_repository,
    todo_service,
)

__all__ = [
    "access_guard",
    "actor_context",
    "admin_actor",
    "audit_log",
    "frozen_clock",
    "manager_actor",
    "other_user_actor",
    "todo_repository",
    "todo_service",
    "user_actor",
]
