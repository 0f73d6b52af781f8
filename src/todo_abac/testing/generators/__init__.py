"""Testing generators – property-based strategies."""
from todo_abac.testing.generators.strategies import (
    DEFAULT_IDS,
    actor_strategy,
    malformed_role_strategy,
    role_strategy,
    status_strategy,
    todo_strategy,
)

__all__ = [
    "DEFAULT_IDS",
    "actor_strategy",
    "malformed_role_strategy",
    "role_strategy",
    "status_strategy",
    "todo_strategy",
]
