"""Kernel security – ActorContext using contextvars."""

from __future__ import annotations

import contextvars

from todo_abac.kernel.errors import UnauthorizedError
from todo_abac.kernel.security.actor import Actor

_VAR: contextvars.ContextVar[Actor | None] = contextvars.ContextVar(
    "_actor_context", default=None
)


class ActorContext:
    """Store and retrieve the authenticated :class:`Actor` via
    :mod:`contextvars` so each asyncio task has its own isolated context."""

    @staticmethod
    def get_current() -> Actor | None:
        """Return the current actor, or ``None`` if absent."""
        return _VAR.get()

    @staticmethod
    def set_current(actor: Actor) -> contextvars.Token[Actor | None]:
        """Set the current actor and return a reset token."""
        return _VAR.set(actor)

    @staticmethod
    def reset(token: contextvars.Token[Actor | None]) -> None:
        _VAR.reset(token)

    @staticmethod
    def clear() -> None:
        """Remove the current actor from context."""
        _VAR.set(None)

    @staticmethod
    def require() -> Actor:
        """Return the current actor or raise ``UnauthorizedError``."""
        actor = _VAR.get()
        if actor is None:
            raise UnauthorizedError("No authenticated actor in context")
        return actor


__all__ = ["ActorContext"]
