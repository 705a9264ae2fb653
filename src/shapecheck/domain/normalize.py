"""Model normalizer — raw schema to :class:`CanonicalModel`.

Three raw forms are accepted:

- a notation string: a schema for the whole value (key ``''``);
- a one-element list: an array whose elements all match the element
  schema (keys ``''`` and ``'[]'``);
- a mapping: one schema per property key.

Nested mappings and lists are carried as :class:`NestedSchema` and only
normalized when the validator descends into them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from shapecheck.domain.descriptor import CanonicalModel, NestedSchema
from shapecheck.domain.errors import SchemaError
from shapecheck.domain.notation import DecodeCache, decode


def normalize(raw_schema: Any, *, cache: DecodeCache | None = None) -> CanonicalModel:
    """Expand *raw_schema* into a canonical model.

    Raises:
        SchemaError: *raw_schema* is not a string, one-element list, or mapping.
        NotationError: A notation string inside it cannot be decoded.
    """
    model = CanonicalModel()
    if isinstance(raw_schema, str):
        model.add("", decode(raw_schema, "", cache=cache))
    elif isinstance(raw_schema, (list, tuple)):
        if len(raw_schema) != 1:
            raise SchemaError(
                f"Array schema must have exactly one element schema, got {len(raw_schema)}"
            )
        model.add("", decode("[]", cache=cache))
        model.add("[]", _entry(raw_schema[0], "[]", cache))
    elif isinstance(raw_schema, Mapping):
        for key, value in raw_schema.items():
            if not isinstance(key, str):
                raise SchemaError(f"Schema keys must be strings, got {key!r}")
            model.add(key, _entry(value, key, cache))
    else:
        raise SchemaError(f"Unsupported schema type: {type(raw_schema).__name__}")
    return model


def _entry(value: Any, name: str, cache: DecodeCache | None) -> Any:
    if isinstance(value, str):
        return decode(value, name, cache=cache)
    if isinstance(value, (Mapping, list, tuple)):
        return NestedSchema(raw=value, name=name)
    raise SchemaError(f"Schema for `{name}` must be a notation string or nested schema")
