"""Application-layer errors — authentication and authorization outcomes."""

from __future__ import annotations

from typing import Any

from todo_abac.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """No authenticated actor."""

    default_code = "unauthorized"

    def __init__(self, message: str = "Unauthorized", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ForbiddenError(ApplicationError):
    """The authenticated actor was denied by the access policy.

    The message stays generic so that the response does not reveal who owns
    the record or what state it is in.
    """

    default_code = "forbidden"

    def __init__(
        self,
        message: str = "Forbidden",
        *,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.operation = operation


__all__ = ["ApplicationError", "ForbiddenError", "UnauthorizedError"]
