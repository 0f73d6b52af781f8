"""Unit tests for observability logging."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from todo_abac.config import AccessSettings
from todo_abac.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


class CaptureLogger:
    def __init__(self) -> None:
        self.entries: list[dict[str, Any]] = []

    def warning(self, event: Any, **kwargs: Any) -> None:
        self.entries.append({"event": event, **kwargs})


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact_deep({"password": "s3cr3t"})["password"] == SensitiveFieldsFilter.REDACTED

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact_deep({k: "v" for k in DEFAULT_SENSITIVE_FIELDS})
        assert set(result.values()) == {SensitiveFieldsFilter.REDACTED}

    def test_case_insensitive_key_matching(self) -> None:
        assert SensitiveFieldsFilter().redact_deep({"Authorization": "Bearer x"})["Authorization"] == "[REDACTED]"

    def test_non_sensitive_untouched(self) -> None:
        assert SensitiveFieldsFilter().redact_deep({"todo_id": "t1"}) == {"todo_id": "t1"}

    def test_redact_deep_nested(self) -> None:
        result = SensitiveFieldsFilter().redact_deep({"headers": {"cookie": "sess", "accept": "json"}})
        assert result == {"headers": {"cookie": "[REDACTED]", "accept": "json"}}

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"owner_email"}))
        assert f.redact_deep({"owner_email": "a@b.c", "password": "p"}) == {
            "owner_email": "[REDACTED]",
            "password": "p",
        }


class TestAuditLogger:
    def test_log_access_fields(self) -> None:
        underlying = CaptureLogger()
        log = AuditLogger(service="api", logger=underlying)

        class FakeActor:
            id = "u1"

        log.log_access(FakeActor(), resource="todo:t1", action="delete", outcome=AuditOutcome.DENIED)
        entry = underlying.entries[0]
        assert entry["event"] == "audit.access"
        assert entry["service"] == "api"
        assert entry["principal_id"] == "u1"
        assert entry["resource"] == "todo:t1"
        assert entry["outcome"] == "denied"
        assert "timestamp" in entry

    def test_plain_string_outcome(self) -> None:
        underlying = CaptureLogger()
        AuditLogger(logger=underlying).log_access("anon", resource="todo", action="create", outcome="failure")
        assert underlying.entries[0]["outcome"] == "failure"
        assert underlying.entries[0]["principal_id"] == "anon"

    def test_log_security_event(self) -> None:
        underlying = CaptureLogger()
        AuditLogger(logger=underlying).log_security_event("unauthenticated", description="no actor")
        entry = underlying.entries[0]
        assert entry["event"] == "audit.unauthenticated"
        assert "principal_id" not in entry

    def test_stdlib_logger_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        log = AuditLogger(logger=logging.getLogger("test.audit"))
        with caplog.at_level(logging.WARNING, logger="test.audit"):
            log.log_access("u1", resource="todo:t1", action="view")
        assert "audit.access" in caplog.text
        assert "principal_id='u1'" in caplog.text

    def test_default_logger_does_not_raise(self) -> None:
        AuditLogger(service="test").log_access("anon", resource="todo", action="view")

    def test_outcome_values(self) -> None:
        assert [o.value for o in AuditOutcome] == ["success", "denied"]


class TestGetLogger:
    def test_bound_values(self) -> None:
        logger = get_logger("todo_abac.test", component="guard")
        assert logger is not None
        logger.info("ping")


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_root(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_configure_installs_json_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_configure_accepts_level_name(self) -> None:
        JsonLoggerFactory.configure(level="debug", sensitive_fields=frozenset({"token"}))
        assert logging.getLogger().level == logging.DEBUG

    def test_redacts_configured_fields_in_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level="info", sensitive_fields=AccessSettings().redacted_fields)
        get_logger("todo_abac.test.redaction").warning(
            "actor.resolution_failed",
            headers={"authorization": "Bearer abc", "x-actor-id": "u1"},
        )
        err = capsys.readouterr().err
        assert "actor.resolution_failed" in err
        assert "Bearer abc" not in err
        assert '"authorization": "[REDACTED]"' in err
        assert '"x-actor-id": "u1"' in err
