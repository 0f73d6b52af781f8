"""Kernel security – Role and Actor."""
from __future__ import annotations

import dataclasses
from enum import Enum

from todo_abac.kernel.errors.domain import ValidationError


class Role(str, Enum):
    """Closed set of actor roles."""

    USER = "user"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def parse(cls, raw: object) -> "Role | None":
        """Return the matching member, or ``None`` for an unrecognised value.

        Exact, case-sensitive match.  Never raises.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class Actor:
    """Authenticated caller.

    ``role`` is parsed on construction; ``None`` means the incoming value was
    not one of :class:`Role` and every decision for this actor is a deny.
    """

    id: str
    role: Role | None
    email: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role.parse(self.role))

    @classmethod
    def from_raw(cls, id: object, role: object, email: str | None = None) -> "Actor":
        """Build an actor from values handed over by the authentication layer.

        Raises :class:`ValidationError` for an empty id.  An unknown role is
        kept as ``None`` rather than rejected.
        """
        if not isinstance(id, str) or not id:
            raise ValidationError(
                "Actor id must be a non-empty string",
                errors=[{"field": "id", "message": "Required"}],
            )
        return cls(id=id, role=Role.parse(role), email=email)


__all__ = ["Actor", "Role"]
