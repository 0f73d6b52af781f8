"""FastAPI adapter – application factory wiring settings, logging and routes."""
from __future__ import annotations

from typing import Any

from todo_abac.adapters.fastapi._compat import _require_fastapi
from todo_abac.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from todo_abac.adapters.fastapi.middleware import (
    ActorResolver,
    FastAPIActorMiddleware,
    header_actor_resolver,
)
from todo_abac.adapters.fastapi.routers import TodoRouter
from todo_abac.application.access import AccessGuard
from todo_abac.application.todos import (
    InMemoryTodoRepository,
    OwnerDirectory,
    TodoRepository,
    TodoService,
)
from todo_abac.config.settings import AccessSettings, EnvSettingsLoader
from todo_abac.observability.logging import AuditLogger, JsonLoggerFactory


def create_app(
    settings: AccessSettings | None = None,
    repository: TodoRepository | None = None,
    resolver: ActorResolver | None = None,
    *,
    configure_logging: bool = True,
    owners: OwnerDirectory | None = None,
) -> Any:
    """Build a FastAPI app serving the guarded todo routes.

    *settings* default to the ``TODO_ABAC_*`` environment; *repository*
    defaults to an in-memory store; *resolver* defaults to
    :func:`header_actor_resolver` with the configured ``default_role``;
    *owners* supplies the owner names shown in listings.
    """
    _require_fastapi()
    from fastapi import FastAPI

    settings = settings or EnvSettingsLoader().load(AccessSettings)
    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level_number, settings.redacted_fields)

    guard = AccessGuard(
        AuditLogger(service=settings.service_name),
        audit_decisions=settings.audit_decisions,
    )
    service = TodoService(repository or InMemoryTodoRepository(), guard=guard, owners=owners)

    app = FastAPI(title=settings.service_name)
    app.add_middleware(
        FastAPIActorMiddleware,
        resolver=resolver or header_actor_resolver(settings.default_role),
    )
    FastAPIExceptionMapper().register(app)
    app.include_router(TodoRouter(service))
    app.state.todo_service = service
    return app


__all__ = ["create_app"]
