"""FastAPI adapter – reusable dependency functions."""
from __future__ import annotations

from todo_abac.kernel.security.actor import Actor
from todo_abac.kernel.security.security_context import ActorContext


async def current_actor() -> Actor | None:
    """Return the actor resolved by :class:`FastAPIActorMiddleware`, if any.

    Refusing an anonymous request is left to the service so that it is
    audited in one place.
    """
    return ActorContext.get_current()


__all__ = ["current_actor"]
