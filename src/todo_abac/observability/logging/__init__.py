"""Observability – structured logging helpers."""
from todo_abac.observability.logging.audit import AuditLogger, AuditOutcome
from todo_abac.observability.logging.factory import JsonLoggerFactory
from todo_abac.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from todo_abac.observability.logging.processors import get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
