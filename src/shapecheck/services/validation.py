"""ValidationService — validate, decode, normalize, and emit schemas.

Schemas come either from a document (JSON/YAML) or from a single inline
notation string. Definitions tables configured in ``shapecheck.toml`` are
loaded first; definitions passed per call are merged on top.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from shapecheck.domain.emitters import json_schema
from shapecheck.domain.errors import SchemaError, ShapecheckError
from shapecheck.domain.normalize import normalize
from shapecheck.domain.notation import DecodeCache, decode, encode
from shapecheck.domain.validator import Validator
from shapecheck.infrastructure.documents import load_definitions, load_document
from shapecheck.services.base import BaseService
from shapecheck.services.result import ErrorCode, ServiceResult
from shapecheck.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from shapecheck.config.settings import ShapecheckSettings


class ValidationService(BaseService):
    """Schema operations over documents on disk.

    The service owns one :class:`Validator` (and so one decode cache),
    sized by ``[validator] cache_size`` (0 means unbounded).
    """

    def __init__(self, settings: ShapecheckSettings) -> None:
        super().__init__(settings)
        cache_size = settings.validator.cache_size
        self._validator = Validator(
            cache=DecodeCache(maxsize=cache_size or None),
            options=settings.validator.options(),
        )

    @property
    def cache(self) -> DecodeCache:
        return self._validator.cache

    @traced
    def validate(
        self,
        data_path: Path,
        *,
        schema_path: Path | None = None,
        notation: str | None = None,
        definition_paths: Sequence[Path] = (),
        validate_model: bool | None = None,
    ) -> ServiceResult:
        """Validate the document at *data_path* against a schema.

        Fails with ``VALIDATION_FAILED`` when the data does not conform;
        ``detail`` then carries the failure code, path, and step. Log
        records emitted during the call carry the data file as context.
        """
        op = "validate"
        log = structlog.get_logger(__name__)
        with structlog.contextvars.bound_contextvars(op=op, file=str(data_path)):
            try:
                with trace_span("load"):
                    value = load_document(data_path)
                    schema = self._schema(schema_path, notation)
                    definitions = load_definitions(
                        [*self._settings.definition_paths(), *definition_paths]
                    )
                options = self._validator.options
                if validate_model is not None:
                    options = options.model_copy(update={"validate_model": validate_model})
                with trace_span("walk"):
                    result = self._validator.validate(value, schema, definitions, options)
            except ShapecheckError as exc:
                return self._failure(op, exc)

            if not result.ok:
                detail = {
                    "code": str(result.code),
                    "path": result.path or "/",
                    "step": result.step,
                    "file": str(data_path),
                }
                log.info(
                    "validation.failed", code=detail["code"], path=result.path, step=result.step
                )
                return ServiceResult.failure(
                    op,
                    ErrorCode.VALIDATION_FAILED,
                    result.message or "Validation failed",
                    detail,
                )
            log.debug("validation.passed", keys=len(result.model or {}))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "valid": True,
                "file": str(data_path),
                "keys": list(result.model or {}),
                "definitions": len(definitions),
            },
        )

    @traced
    def decode(self, notation: str) -> ServiceResult:
        """Decode one notation string and report its descriptor."""
        op = "decode"
        try:
            descriptor = decode(notation, cache=self.cache)
        except ShapecheckError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={**descriptor.summary(), "encoded": encode(descriptor)},
        )

    @traced
    def normalize(
        self, *, schema_path: Path | None = None, notation: str | None = None
    ) -> ServiceResult:
        """Report the canonical model of a schema."""
        op = "normalize"
        try:
            model = normalize(self._schema(schema_path, notation), cache=self.cache)
        except ShapecheckError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"model": model.to_dict()})

    @traced
    def emit_json_schema(
        self, *, schema_path: Path | None = None, notation: str | None = None
    ) -> ServiceResult:
        """Convert a schema to a JSON Schema document."""
        op = "emit_json_schema"
        try:
            document = json_schema(self._schema(schema_path, notation), cache=self.cache)
        except ShapecheckError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"schema": document})

    @staticmethod
    def _schema(schema_path: Path | None, notation: str | None) -> Any:
        if (schema_path is None) == (notation is None):
            raise SchemaError("Provide exactly one of a schema file or a notation string")
        if notation is not None:
            return notation
        assert schema_path is not None
        return load_document(schema_path)
