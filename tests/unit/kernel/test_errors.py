"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from todo_abac.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["message"] == "oops"

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestDomainErrors:
    def test_domain_error_is_base_error(self) -> None:
        assert issubclass(DomainError, BaseError)

    def test_not_found_formats_message(self) -> None:
        err = NotFoundError("Todo", "t-123")
        assert err.message == "Todo 't-123' not found"
        assert err.code == "not_found"
        assert err.identifier == "t-123"

    def test_not_found_without_id(self) -> None:
        assert NotFoundError("Todo").message == "Todo not found"

    def test_validation_error_carries_field_errors(self) -> None:
        err = ValidationError("Invalid input", errors=[{"field": "title", "message": "Required"}])
        assert err.to_dict()["errors"] == [{"field": "title", "message": "Required"}]

    def test_validation_error_defaults_to_empty_list(self) -> None:
        assert ValidationError("bad").errors == []


class TestApplicationErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(UnauthorizedError, ApplicationError)
        assert issubclass(ForbiddenError, ApplicationError)

    def test_unauthorized_defaults(self) -> None:
        err = UnauthorizedError()
        assert err.code == "unauthorized"
        assert err.message == "Unauthorized"

    def test_forbidden_message_is_generic(self) -> None:
        err = ForbiddenError(operation="delete")
        assert err.message == "Forbidden"
        assert err.detail == {}
        assert err.operation == "delete"

    def test_is_exception(self) -> None:
        with pytest.raises(ApplicationError):
            raise ForbiddenError()
