"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    └── ApplicationError     (application.py)
        ├── UnauthorizedError
        └── ForbiddenError
"""

from todo_abac.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    UnauthorizedError,
)
from todo_abac.kernel.errors.base import BaseError
from todo_abac.kernel.errors.domain import DomainError, NotFoundError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
