"""ValidationResult and ValidateOptions."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, model_validator

from shapecheck.domain.types import FailureCode


class ValidateOptions(BaseModel):
    """Per-call validation switches.

    Attributes:
        validate_model: Check the raw schema against the meta-schema
            (every property value is a notation string) before the walk.
        max_depth: Maximum number of nested reference hops.
    """

    model_config = {"frozen": True}

    validate_model: bool = Field(
        default=False,
        validation_alias=AliasChoices("validate_model", "validateModel"),
    )
    max_depth: int = Field(default=64, ge=1)


class ValidationResult(BaseModel):
    """Outcome of one ``validate`` call.

    Attributes:
        ok: Whether the value conforms.
        obj: The value (or containing object) where the walk stopped.
        model: The canonical model being applied at that point.
        step: ``"model"`` for the meta-schema pre-check, ``"object"`` otherwise.
        message: Human-readable failure reason; None on success.
        path: JSON-pointer-style location of the failing value.
        code: Failure classification; None on success.
    """

    model_config = {"frozen": True}

    ok: bool
    obj: Any = None
    model: Any = None
    step: str = "object"
    message: str | None = None
    path: str = ""
    code: FailureCode | None = None

    @model_validator(mode="after")
    def check_failure_message(self) -> ValidationResult:
        if not self.ok and not self.message:
            raise ValueError("failed ValidationResult requires a message")
        return self
