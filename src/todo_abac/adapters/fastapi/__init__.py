"""FastAPI adapter – actor middleware, exception mapper, todo routes."""
from todo_abac.adapters.fastapi.app import create_app
from todo_abac.adapters.fastapi.deps import current_actor
from todo_abac.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from todo_abac.adapters.fastapi.middleware import (
    ActorResolver,
    FastAPIActorMiddleware,
    header_actor_resolver,
)
from todo_abac.adapters.fastapi.routers import TodoRouter

__all__ = [
    "ActorResolver",
    "FastAPIActorMiddleware",
    "FastAPIExceptionMapper",
    "TodoRouter",
    "create_app",
    "current_actor",
    "header_actor_resolver",
]
