"""Application todos – CreateTodo / UpdateTodo commands with input validation."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Mapping

from todo_abac.kernel.errors import ValidationError
from todo_abac.kernel.todos.models import Todo, TodoStatus

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


def _check_title(value: Any, errors: list[dict[str, Any]]) -> None:
    if not isinstance(value, str):
        errors.append({"field": "title", "message": "Expected string"})
    elif len(value) < 1:
        errors.append({"field": "title", "message": "Title is required"})
    elif len(value) > TITLE_MAX_LENGTH:
        errors.append({"field": "title", "message": "Title is too long"})


def _check_description(value: Any, errors: list[dict[str, Any]]) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        errors.append({"field": "description", "message": "Expected string"})
    elif len(value) > DESCRIPTION_MAX_LENGTH:
        errors.append({"field": "description", "message": "Description is too long"})


def _check_status(value: Any, errors: list[dict[str, Any]]) -> None:
    if TodoStatus.parse(value) is None:
        allowed = ", ".join(s.value for s in TodoStatus)
        errors.append({"field": "status", "message": f"Invalid status, expected one of: {allowed}"})


def _raise_if_any(errors: list[dict[str, Any]]) -> None:
    if errors:
        raise ValidationError("Invalid input", errors=errors)


@dataclasses.dataclass(frozen=True)
class CreateTodo:
    """Validated input for creating a todo.  ``status`` defaults to draft."""

    title: str
    description: str | None = None
    status: TodoStatus = TodoStatus.DRAFT

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        _check_title(self.title, errors)
        _check_description(self.description, errors)
        _check_status(self.status, errors)
        _raise_if_any(errors)
        object.__setattr__(self, "status", TodoStatus.parse(self.status))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "CreateTodo":
        if not isinstance(payload, Mapping):
            raise ValidationError("Invalid input", errors=[{"field": "", "message": "Expected a JSON object"}])
        return cls(
            title=payload.get("title"),  # type: ignore[arg-type]
            description=payload.get("description"),
            status=payload.get("status", TodoStatus.DRAFT),  # type: ignore[arg-type]
        )


@dataclasses.dataclass(frozen=True)
class UpdateTodo:
    """Validated partial update.  ``None`` means "leave unchanged"."""

    title: str | None = None
    description: str | None = None
    status: TodoStatus | None = None

    def __post_init__(self) -> None:
        errors: list[dict[str, Any]] = []
        if self.title is not None:
            _check_title(self.title, errors)
        _check_description(self.description, errors)
        if self.status is not None:
            _check_status(self.status, errors)
        _raise_if_any(errors)
        if self.status is not None:
            object.__setattr__(self, "status", TodoStatus.parse(self.status))

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "UpdateTodo":
        if not isinstance(payload, Mapping):
            raise ValidationError("Invalid input", errors=[{"field": "", "message": "Expected a JSON object"}])
        return cls(
            title=payload.get("title"),
            description=payload.get("description"),
            status=payload.get("status"),  # type: ignore[arg-type]
        )

    def apply_to(self, todo: Todo, updated_at: datetime) -> Todo:
        """Return a copy of *todo* with the supplied fields changed.

        ``id`` and ``owner_id`` are never touched.
        """
        changes: dict[str, Any] = {"updated_at": updated_at}
        if self.title is not None:
            changes["title"] = self.title
        if self.description is not None:
            changes["description"] = self.description
        if self.status is not None:
            changes["status"] = self.status
        return dataclasses.replace(todo, **changes)


__all__ = ["CreateTodo", "DESCRIPTION_MAX_LENGTH", "TITLE_MAX_LENGTH", "UpdateTodo"]
