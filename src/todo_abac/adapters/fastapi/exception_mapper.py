"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from todo_abac.adapters.fastapi._compat import _require_fastapi
from todo_abac.kernel.errors import (
    BaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class FastAPIExceptionMapper:
    """Register todo_abac error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "forbidden", "message": "Forbidden", "detail": {}}

    Mappings
    --------
    ``ValidationError``     → 400
    ``UnauthorizedError``   → 401
    ``ForbiddenError``      → 403
    ``NotFoundError``       → 404
    ``DomainError``         → 422
    """

    def __init__(self) -> None:
        _require_fastapi()
        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (ValidationError, 400),
            (NotFoundError, 404),
            (UnauthorizedError, 401),
            (ForbiddenError, 403),
            (DomainError, 422),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    if isinstance(exc, BaseError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
