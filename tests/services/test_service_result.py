"""Tests for ServiceResult and ServiceError."""

import pytest
from pydantic import ValidationError

from shapecheck.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_defaults(self) -> None:
        result = ServiceResult(ok=True, op="decode", data={"type": "string"})
        assert result.error is None
        assert result.meta is None
        assert result.exit_code == 0

    def test_failure_carries_error(self) -> None:
        error = ServiceError(code="NOTATION_ERROR", message="bad", detail={"notation": "x"})
        result = ServiceResult(ok=False, op="decode", error=error)
        assert result.error is not None
        assert result.error.code is ErrorCode.NOTATION_ERROR
        assert result.error.detail == {"notation": "x"}

    def test_failure_factory(self) -> None:
        result = ServiceResult.failure(
            "validate", ErrorCode.VALIDATION_FAILED, "Expected string", {"path": "/a"}
        )
        assert result.ok is False
        assert result.op == "validate"
        assert result.error == ServiceError(
            code=ErrorCode.VALIDATION_FAILED, message="Expected string", detail={"path": "/a"}
        )
        assert result.exit_code == 1

    def test_failure_factory_defaults_detail(self) -> None:
        result = ServiceResult.failure("decode", ErrorCode.NOTATION_ERROR, "bad")
        assert result.error is not None
        assert result.error.detail == {}

    def test_failed_result_requires_error(self) -> None:
        with pytest.raises(ValidationError, match="wrong error state"):
            ServiceResult(ok=False, op="decode")

    def test_successful_result_rejects_error(self) -> None:
        error = ServiceError(code=ErrorCode.LOAD_ERROR, message="gone")
        with pytest.raises(ValidationError, match="wrong error state"):
            ServiceResult(ok=True, op="validate", error=error)

    def test_unknown_error_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="TEAPOT", message="no")

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="decode")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult.failure(
            "validate", ErrorCode.VALIDATION_FAILED, "nope", {"code": "type_mismatch"}
        )
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result
