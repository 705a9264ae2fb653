"""JSON Schema emitter layered on the canonical model.

Output follows draft-07. Exclusive length bounds become inclusive
``minLength``/``maxLength`` (and ``minItems``/``maxItems``) shifted by one;
numeric bounds map to ``exclusiveMinimum``/``exclusiveMaximum``.
References become ``$ref`` pointers into the same document, so emitted
definitions should be placed at the matching paths by the caller.
"""

from __future__ import annotations

from typing import Any

from shapecheck.domain.descriptor import CanonicalModel, NestedSchema, TypeDescriptor
from shapecheck.domain.normalize import normalize
from shapecheck.domain.notation import DecodeCache
from shapecheck.domain.references import format_ref
from shapecheck.domain.types import Kind, SelectorKind

JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

_LENGTH_KEYWORDS: dict[Kind, tuple[str, str]] = {
    Kind.STRING: ("minLength", "maxLength"),
    Kind.ARRAY: ("minItems", "maxItems"),
}


def json_schema(raw_schema: Any, *, cache: DecodeCache | None = None) -> dict[str, Any]:
    """Convert a raw schema into a JSON Schema document."""
    body = _model_schema(normalize(raw_schema, cache=cache), cache)
    if isinstance(body, bool):
        body = {} if body else {"not": {}}
    return {"$schema": JSON_SCHEMA_DRAFT, **body}


def _model_schema(model: CanonicalModel, cache: DecodeCache | None) -> dict[str, Any] | bool:
    schema: dict[str, Any] | bool = {}
    properties: dict[str, Any] = {}
    required: list[str] = []
    extras: dict[str, Any] = {}

    for selector, entry in model.walk_order():
        if selector.kind is SelectorKind.SELF:
            schema = _entry_schema(entry, cache)
        elif selector.kind is SelectorKind.ELEMENTS:
            extras["items"] = _entry_schema(entry, cache)
        elif selector.kind is SelectorKind.ALL_VALUES:
            extras["additionalProperties"] = _entry_schema(entry, cache)
        else:
            properties[selector.key] = _entry_schema(entry, cache)
            if _is_required(entry):
                required.append(selector.key)

    if isinstance(schema, bool):
        return schema
    schema = dict(schema)
    if properties or "additionalProperties" in extras:
        schema.setdefault("type", "object")
    if properties:
        schema["properties"] = properties
    if required:
        schema["required"] = required
    schema.update(extras)
    return schema


def _entry_schema(
    entry: TypeDescriptor | NestedSchema, cache: DecodeCache | None
) -> dict[str, Any] | bool:
    if isinstance(entry, NestedSchema):
        return _model_schema(normalize(entry.raw, cache=cache), cache)
    return descriptor_schema(entry)


def _is_required(entry: TypeDescriptor | NestedSchema) -> bool:
    if isinstance(entry, NestedSchema):
        return True
    return not entry.optional and entry.type is not Kind.UNDEFINED


def descriptor_schema(desc: TypeDescriptor) -> dict[str, Any] | bool:
    """JSON Schema for one descriptor; ``False`` for the undefined kind."""
    if desc.type is Kind.UNDEFINED:
        return False

    schema: dict[str, Any] = {}
    if desc.ref is not None:
        schema["$ref"] = format_ref(desc.ref)
        if desc.nullable:
            return {"anyOf": [schema, {"type": "null"}]}
        return schema

    if desc.type is not Kind.VARIABLE:
        kind = str(desc.type)
        schema["type"] = [kind, "null"] if desc.nullable and desc.type is not Kind.NULL else kind

    if desc.type in _LENGTH_KEYWORDS:
        low, high = _LENGTH_KEYWORDS[desc.type]
        if desc.min is not None:
            schema[low] = int(desc.min) + 1
        if desc.max is not None:
            schema[high] = int(desc.max) - 1
    elif desc.type in (Kind.NUMBER, Kind.INTEGER):
        if desc.min is not None:
            schema["exclusiveMinimum"] = desc.min
        if desc.max is not None:
            schema["exclusiveMaximum"] = desc.max

    if desc.enum:
        schema["enum"] = list(desc.enum)
    return schema
