"""FastAPI adapter – todo routes."""
# Annotations stay eager here: ``Request`` is imported inside the factory and
# FastAPI has to see the class itself to inject it.

from typing import Any

from todo_abac.adapters.fastapi._compat import _require_fastapi
from todo_abac.adapters.fastapi.deps import current_actor
from todo_abac.application.todos import TodoService
from todo_abac.kernel.security.actor import Actor


async def _read_json(request: Any) -> Any:
    """Return the decoded JSON body, or ``None`` when it is empty or malformed.

    The body is left unchecked here; the service validates it after the
    access decision.
    """
    try:
        return await request.json()
    except ValueError:
        return None


def TodoRouter(
    service: TodoService,
    prefix: str = "/todos",
    tags: list[str] | None = None,
) -> Any:
    """Return a router exposing *service* over HTTP.

    ``GET {prefix}``, ``POST {prefix}``, ``GET {prefix}/{id}``,
    ``PATCH {prefix}/{id}`` and ``DELETE {prefix}/{id}``.  Listed todos carry
    ``user_name``/``user_email`` of their owner.  Request bodies are
    read raw so that a caller who may not write gets 401/403 whatever they
    sent; a body that is not a JSON object is a 400 from the service.
    Errors are turned into responses by :class:`FastAPIExceptionMapper`.
    """
    _require_fastapi()
    from fastapi import APIRouter, Depends, Request

    router = APIRouter(prefix=prefix, tags=tags or ["todos"])

    @router.get("")
    async def list_todos(actor: Actor | None = Depends(current_actor)) -> dict[str, Any]:
        rows = await service.list_todos_with_owners(actor)
        return {
            "todos": [
                {**todo.to_dict(), "user_name": owner.name, "user_email": owner.email}
                for todo, owner in rows
            ]
        }

    @router.post("")
    async def create_todo(
        request: Request,
        actor: Actor | None = Depends(current_actor),
    ) -> dict[str, Any]:
        todo = await service.create_todo(actor, await _read_json(request))
        return {"todo": todo.to_dict()}

    @router.get("/{todo_id}")
    async def get_todo(todo_id: str, actor: Actor | None = Depends(current_actor)) -> dict[str, Any]:
        todo = await service.get_todo(actor, todo_id)
        return {"todo": todo.to_dict()}

    @router.patch("/{todo_id}")
    async def update_todo(
        todo_id: str,
        request: Request,
        actor: Actor | None = Depends(current_actor),
    ) -> dict[str, Any]:
        todo = await service.update_todo(actor, todo_id, await _read_json(request))
        return {"todo": todo.to_dict()}

    @router.delete("/{todo_id}")
    async def delete_todo(todo_id: str, actor: Actor | None = Depends(current_actor)) -> dict[str, bool]:
        await service.delete_todo(actor, todo_id)
        return {"success": True}

    return router


__all__ = ["TodoRouter"]
