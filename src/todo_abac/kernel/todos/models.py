"""Kernel todos – TodoStatus and the Todo record."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Mapping

from todo_abac.kernel.errors.domain import ValidationError


class TodoStatus(str, Enum):
    """Lifecycle status of a todo."""

    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: object) -> "TodoStatus | None":
        """Return the matching member, or ``None`` for anything unrecognised.

        Matching is exact and case-sensitive. Never raises.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


def _parse_timestamp(raw: object) -> datetime | None:
    """Return *raw* as an aware datetime, or ``None`` if it is not one.

    Naive values are taken as UTC.
    """
    if isinstance(raw, str):
        try:
            raw = datetime.fromisoformat(raw)
        except ValueError:
            return None
    if not isinstance(raw, datetime):
        return None
    return raw if raw.tzinfo is not None else raw.replace(tzinfo=UTC)


@dataclasses.dataclass(frozen=True)
class Todo:
    """A todo record as persisted.

    ``owner_id`` is fixed at creation.  ``status`` is parsed into
    :class:`TodoStatus` on construction; an unrecognised stored value becomes
    ``None``, which every policy rule treats as not-draft.
    """

    id: str
    owner_id: str
    status: TodoStatus | None = TodoStatus.DRAFT
    title: str = ""
    description: str | None = None
    created_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", TodoStatus.parse(self.status))

    @classmethod
    def from_raw(cls, row: Mapping[str, Any]) -> "Todo":
        """Build a :class:`Todo` from an untyped storage row.

        The owner may be given as ``owner_id`` or as the stored column name
        ``user_id``.  Timestamps may be :class:`datetime` values or ISO 8601
        strings.  Raises :class:`ValidationError` when ``id`` or the owner is
        missing, or when a timestamp is neither.
        """
        owner = row.get("owner_id") or row.get("user_id")
        errors = [
            {"field": name, "message": "Required"}
            for name, value in (("id", row.get("id")), ("owner_id", owner))
            if not value
        ]
        timestamps: dict[str, datetime] = {}
        for name in ("created_at", "updated_at"):
            raw = row.get(name)
            if raw is None:
                continue
            parsed = _parse_timestamp(raw)
            if parsed is None:
                errors.append({"field": name, "message": "Expected an ISO 8601 timestamp"})
            else:
                timestamps[name] = parsed
        if errors:
            raise ValidationError("Invalid todo record", errors=errors)
        return cls(
            id=str(row["id"]),
            owner_id=str(owner),
            status=row.get("status"),
            title=row.get("title") or "",
            description=row.get("description"),
            **timestamps,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a JSON-friendly dict."""
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value if self.status is not None else None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


__all__ = ["Todo", "TodoStatus"]
