"""Config settings – AccessSettings for the todo access service."""
from __future__ import annotations

import dataclasses
import logging

from todo_abac.config.settings.base import Settings
from todo_abac.config.validation import InvalidSettingValueError
from todo_abac.kernel.security.actor import Role
from todo_abac.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class AccessSettings(Settings):
    """Settings read from ``TODO_ABAC_*`` environment variables.

    ``default_role`` is the role given to an authenticated actor whose
    identity carries no role at all; it is never applied to a role value
    that is present but unrecognised.  ``sensitive_fields`` names the log
    keys (header names included) whose values are redacted; set
    ``TODO_ABAC_SENSITIVE_FIELDS`` to a comma-separated list to replace it.
    """

    _prefix: dataclasses.ClassVar[str] = "TODO_ABAC"

    service_name: str = "todo-abac"
    log_level: str = "INFO"
    audit_decisions: bool = True
    default_role: str = Role.USER.value
    sensitive_fields: list[str] = dataclasses.field(
        default_factory=lambda: sorted(DEFAULT_SENSITIVE_FIELDS)
    )

    def _validate(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        if Role.parse(self.default_role) is None:
            raise InvalidSettingValueError(
                "default_role", self.default_role, f"expected one of {[r.value for r in Role]}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @property
    def redacted_fields(self) -> frozenset[str]:
        return frozenset(name.lower() for name in self.sensitive_fields)


__all__ = ["AccessSettings"]
