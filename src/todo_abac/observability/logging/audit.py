"""Observability – AuditLogger.

A dedicated structured-log sink for access decisions and other
security-sensitive events.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from todo_abac.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Standardised audit outcomes."""

    SUCCESS = "success"
    DENIED = "denied"


class AuditLogger:
    """Dedicated structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying logger to use.  Defaults to a structlog logger named
        ``todo_abac.audit``.  A plain :mod:`logging` logger also works.
    """

    def __init__(
        self,
        service: str = "todo-abac",
        logger: Any = None,
    ) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("todo_abac.audit")

    def log_access(
        self,
        principal: Any,
        resource: str,
        action: str,
        outcome: AuditOutcome | str = AuditOutcome.SUCCESS,
        **extra: Any,
    ) -> None:
        """Record an access decision.

        Parameters
        ----------
        principal:
            The actor performing the action.  Uses ``principal.id`` if
            available, otherwise ``str(principal)``.
        resource:
            The resource being accessed (e.g. ``"todo:42"``).
        action:
            The operation (e.g. ``"view"``, ``"delete"``).
        outcome:
            :class:`AuditOutcome` or plain string.
        **extra:
            Additional structured fields to include in the audit entry.
        """
        principal_id = getattr(principal, "id", None) or str(principal)
        entry: dict[str, Any] = {
            "event": "audit.access",
            "service": self._service,
            "principal_id": principal_id,
            "resource": resource,
            "action": action,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        self._emit(entry)

    def log_security_event(
        self,
        event_type: str,
        principal: Any = None,
        description: str = "",
        **extra: Any,
    ) -> None:
        """Record a generic security event (e.g. ``"unauthenticated"``)."""
        principal_id: str | None = None
        if principal is not None:
            principal_id = getattr(principal, "id", None) or str(principal)

        entry: dict[str, Any] = {
            "event": f"audit.{event_type}",
            "service": self._service,
            "event_type": event_type,
            "description": description,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        if principal_id is not None:
            entry["principal_id"] = principal_id
        self._emit(entry)

    def _emit(self, entry: dict[str, Any]) -> None:
        event = entry.pop("event", "audit")
        try:
            # structlog bound loggers accept event as first positional arg
            self._log.warning(event, **entry)
        except TypeError:
            # stdlib logger: format as key=value pairs
            msg = " ".join(f"{k}={v!r}" for k, v in entry.items())
            self._log.warning("%s %s", event, msg)


__all__ = ["AuditLogger", "AuditOutcome"]
