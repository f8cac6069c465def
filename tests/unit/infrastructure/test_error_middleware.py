"""Tests for error handling middleware."""

import pytest

from src.domain.base.exceptions import ValidationError
from src.infrastructure.error.context import ExceptionContext
from src.infrastructure.error.error_middleware import error_response, handle_exceptions


class TestHandleExceptions:
    """The decorator logs and re-raises."""

    def test_returns_result(self):
        @handle_exceptions("add")
        def add(a, b):
            return a + b

        assert add(1, 2) == 3
        assert add.__name__ == "add"

    def test_domain_exception_reraised(self):
        @handle_exceptions("validate", layer="domain")
        def fail():
            raise ValidationError("bad input", "BAD_INPUT")

        with pytest.raises(ValidationError):
            fail()

    def test_unexpected_exception_reraised(self):
        @handle_exceptions("explode")
        def fail():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            fail()


class TestErrorResponse:
    def test_domain_exception(self):
        response = error_response(ValidationError("bad input", "BAD_INPUT", {"field": "name"}))
        assert response == {"error": "BAD_INPUT", "message": "bad input", "details": {"field": "name"}}

    def test_error_code_defaults_to_class_name(self):
        assert error_response(ValidationError("bad input"))["error"] == "ValidationError"

    def test_unexpected_exception(self):
        response = error_response(KeyError("x"))
        assert response["error"] == "UNEXPECTED_ERROR"
        assert response["details"] == {"type": "KeyError"}


class TestExceptionContext:
    def test_to_dict(self):
        context = ExceptionContext("run_builder", "interface", pattern="builder")
        data = context.to_dict()

        assert data["operation"] == "run_builder"
        assert data["layer"] == "interface"
        assert data["pattern"] == "builder"
        assert data["timestamp"].endswith("+00:00")

    def test_for_domain_exception(self):
        context = ExceptionContext.for_exception("run_builder", "interface", ValidationError("bad", "BAD_INPUT"))
        assert context.to_dict()["error_code"] == "BAD_INPUT"

    def test_for_unexpected_exception(self):
        context = ExceptionContext.for_exception("run_builder", "interface", RuntimeError("boom"))
        assert context.to_dict()["error_type"] == "RuntimeError"
