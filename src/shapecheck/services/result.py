"""ServiceResult, ServiceError, and the service error codes.

INVARIANT: every service method returns a ServiceResult. A result is
either ``ok`` with a data payload or not ``ok`` with exactly one
ServiceError; the model rejects anything in between.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ErrorCode(StrEnum):
    """Why a service operation failed.

    ``VALIDATION_FAILED`` means the data did not conform; the other codes
    mean the inputs themselves could not be used.
    """

    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOTATION_ERROR = "NOTATION_ERROR"
    SCHEMA_ERROR = "SCHEMA_ERROR"
    LOAD_ERROR = "LOAD_ERROR"
    SHAPECHECK_ERROR = "SHAPECHECK_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Uniform return type for service operations.

    Attributes:
        ok: Whether the operation succeeded (for ``validate``: whether the
            data conforms).
        op: Name of the operation (``"validate"``, ``"decode"``, ...).
        data: Operation-specific payload (JSON-serializable).
        error: Set exactly when ``ok`` is False.
        meta: Timing spans, present only with ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def check_error_matches_ok(self) -> ServiceResult:
        if self.ok == (self.error is not None):
            state = "successful" if self.ok else "failed"
            raise ValueError(f"{state} ServiceResult for {self.op!r} has wrong error state")
        return self

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build a failed result carrying one ServiceError."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    @property
    def exit_code(self) -> int:
        """Process exit status for the CLI: 0 on success, 1 otherwise."""
        return 0 if self.ok else 1
