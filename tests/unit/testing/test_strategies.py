"""Unit tests for the Hypothesis strategies used by the property tests."""
from __future__ import annotations

from typing import Any

from hypothesis import given, settings

from todo_abac.kernel.security import Actor, Role
from todo_abac.kernel.todos import Todo, TodoStatus
from todo_abac.testing.generators import (
    DEFAULT_IDS,
    actor_strategy,
    malformed_role_strategy,
    role_strategy,
    status_strategy,
    todo_strategy,
)


class TestStrategies:
    @given(role_strategy())
    def test_roles_are_known(self, role: Role) -> None:
        assert isinstance(role, Role)

    @given(malformed_role_strategy())
    @settings(max_examples=50)
    def test_malformed_roles_never_parse(self, raw: Any) -> None:
        assert Role.parse(raw) is None

    @given(actor_strategy())
    def test_actors_use_pool(self, actor: Actor) -> None:
        assert actor.id in DEFAULT_IDS
        assert actor.role is not None

    @given(todo_strategy(owner_ids=("x",)))
    def test_todo_owner(self, todo: Todo) -> None:
        assert todo.owner_id == "x"
        assert isinstance(todo.status, TodoStatus)

    @given(status_strategy(include_malformed=True))
    def test_status_may_be_malformed(self, raw: Any) -> None:
        parsed = TodoStatus.parse(raw)
        assert parsed is None or isinstance(parsed, TodoStatus)
