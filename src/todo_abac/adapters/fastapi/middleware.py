"""FastAPI adapter – actor resolution middleware.

Identity resolution (sessions, tokens) belongs to the host application; it
plugs in here as a *resolver* callable that turns request headers into an
:class:`~todo_abac.kernel.security.Actor` or ``None``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Awaitable, Callable, Mapping

from todo_abac.adapters.fastapi._compat import _require_fastapi
from todo_abac.kernel.errors import ValidationError
from todo_abac.kernel.security.actor import Actor, Role
from todo_abac.kernel.security.security_context import ActorContext
from todo_abac.observability.logging import get_logger

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

ActorResolver = Callable[[Mapping[str, str]], Awaitable[Actor | None]]

_log = get_logger(__name__)


class FastAPIActorMiddleware:
    """Resolve the calling actor and populate :class:`ActorContext`.

    Parameters
    ----------
    app:
        The inner ASGI application.
    resolver:
        ``async (headers) -> Actor | None``; header names are lower-cased.
        A resolver that raises is treated as "no actor", so the request
        continues unauthenticated and is refused downstream with 401.  The
        failure is logged with the request headers; credentials among them
        are redacted by the logging configuration.
    """

    def __init__(self, app: "ASGIApp", resolver: ActorResolver) -> None:
        _require_fastapi()
        self.app = app
        self._resolver = resolver

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = {
            k.decode("latin-1").lower(): v.decode("latin-1")
            for k, v in scope.get("headers", [])
        }
        try:
            actor = await self._resolver(headers)
        except Exception as exc:  # noqa: BLE001
            _log.warning("actor.resolution_failed", error=repr(exc), headers=headers)
            actor = None

        if actor is None:
            await self.app(scope, receive, send)
            return

        token = ActorContext.set_current(actor)
        try:
            await self.app(scope, receive, send)
        finally:
            ActorContext.reset(token)


def header_actor_resolver(
    default_role: Role | str = Role.USER,
    *,
    id_header: str = "x-actor-id",
    role_header: str = "x-actor-role",
    email_header: str = "x-actor-email",
) -> ActorResolver:
    """Build a resolver that trusts identity headers set by an upstream proxy.

    A missing role header falls back to *default_role*.  A role header that
    is present but not a known role is passed through and parses to ``None``,
    which the policy denies.
    """

    async def resolve(headers: Mapping[str, str]) -> Actor | None:
        actor_id = headers.get(id_header, "").strip()
        if not actor_id:
            return None
        role = headers.get(role_header)
        if role is None:
            role = default_role
        try:
            return Actor.from_raw(actor_id, role, email=headers.get(email_header))
        except ValidationError:
            return None

    return resolve


__all__ = ["ActorResolver", "FastAPIActorMiddleware", "header_actor_resolver"]
