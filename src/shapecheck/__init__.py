"""shapecheck — validate nested values against terse notation schemas."""

from shapecheck.domain.descriptor import CanonicalModel, NestedSchema, Selector, TypeDescriptor
from shapecheck.domain.emitters import json_schema
from shapecheck.domain.errors import NotationError, SchemaError, ShapecheckError
from shapecheck.domain.kinds import UNDEFINED
from shapecheck.domain.normalize import normalize
from shapecheck.domain.notation import DEFAULT_CACHE, DecodeCache, decode, encode
from shapecheck.domain.references import resolve
from shapecheck.domain.result import ValidateOptions, ValidationResult
from shapecheck.domain.types import FailureCode, Kind
from shapecheck.domain.validator import Validator, validate

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_CACHE",
    "UNDEFINED",
    "CanonicalModel",
    "DecodeCache",
    "FailureCode",
    "Kind",
    "NestedSchema",
    "NotationError",
    "SchemaError",
    "Selector",
    "ShapecheckError",
    "TypeDescriptor",
    "ValidateOptions",
    "ValidationResult",
    "Validator",
    "__version__",
    "decode",
    "encode",
    "json_schema",
    "normalize",
    "resolve",
    "validate",
]
