"""Kind, selector, and failure-code enums.

Kinds are the nine shapes a notation string can name. Selectors are the
parsed form of a canonical-model key. Failure codes classify why a
validation walk stopped.
"""

from __future__ import annotations

from enum import StrEnum


class Kind(StrEnum):
    """Schema kinds, keyed by notation prefix in :data:`PREFIX_KINDS`."""

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    INTEGER = "integer"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"
    VARIABLE = "variable"
    UNDEFINED = "undefined"


PREFIX_KINDS: dict[str, Kind] = {
    "$": Kind.STRING,
    "b": Kind.BOOLEAN,
    "#": Kind.NUMBER,
    "0": Kind.INTEGER,
    "!": Kind.NULL,
    "{": Kind.OBJECT,
    "[": Kind.ARRAY,
    "*": Kind.VARIABLE,
    "~": Kind.UNDEFINED,
}

KIND_PREFIXES: dict[Kind, str] = {
    Kind.STRING: "$",
    Kind.BOOLEAN: "b",
    Kind.NUMBER: "#",
    Kind.INTEGER: "0",
    Kind.NULL: "!",
    Kind.OBJECT: "{}",
    Kind.ARRAY: "[]",
    Kind.VARIABLE: "*",
    Kind.UNDEFINED: "~",
}

LENGTH_BOUNDED: frozenset[Kind] = frozenset({Kind.STRING, Kind.ARRAY})
VALUE_BOUNDED: frozenset[Kind] = frozenset({Kind.NUMBER, Kind.INTEGER})
BOUNDED: frozenset[Kind] = LENGTH_BOUNDED | VALUE_BOUNDED


class SelectorKind(StrEnum):
    """How a canonical-model key picks values out of the input."""

    SELF = "self"
    ELEMENTS = "elements"
    ALL_VALUES = "all_values"
    NAMED = "named"


class FailureCode(StrEnum):
    """Why a validation walk stopped."""

    MISSING_PROPERTY = "missing_property"
    TYPE_MISMATCH = "type_mismatch"
    LENGTH_BOUND = "length_bound"
    VALUE_BOUND = "value_bound"
    ENUM_MISMATCH = "enum_mismatch"
    MISSING_REFERENCE = "missing_reference"
    REFERENCE_CYCLE = "reference_cycle"
    DEPTH_EXCEEDED = "depth_exceeded"
