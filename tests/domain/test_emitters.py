"""Tests for the JSON Schema emitter."""

from shapecheck.domain.emitters import JSON_SCHEMA_DRAFT, descriptor_schema, json_schema
from shapecheck.domain.notation import DecodeCache, parse_notation


class TestDescriptorSchema:
    def test_plain_kinds(self) -> None:
        assert descriptor_schema(parse_notation("$")) == {"type": "string"}
        assert descriptor_schema(parse_notation("0")) == {"type": "integer"}

    def test_nullable(self) -> None:
        assert descriptor_schema(parse_notation("b-")) == {"type": ["boolean", "null"]}
        assert descriptor_schema(parse_notation("!-")) == {"type": "null"}

    def test_variable_has_no_type(self) -> None:
        assert descriptor_schema(parse_notation("*")) == {}

    def test_undefined_is_false(self) -> None:
        assert descriptor_schema(parse_notation("~")) is False

    def test_length_bounds_become_inclusive(self) -> None:
        assert descriptor_schema(parse_notation("$>2<10")) == {
            "type": "string",
            "minLength": 3,
            "maxLength": 9,
        }
        assert descriptor_schema(parse_notation("[]>0")) == {"type": "array", "minItems": 1}

    def test_numeric_bounds_stay_exclusive(self) -> None:
        assert descriptor_schema(parse_notation("#>0.5<2")) == {
            "type": "number",
            "exclusiveMinimum": 0.5,
            "exclusiveMaximum": 2.0,
        }

    def test_enum(self) -> None:
        schema = descriptor_schema(parse_notation('$=["a","b"]='))
        assert schema == {"type": "string", "enum": ["a", "b"]}
        assert "enum" not in descriptor_schema(parse_notation("$=[]="))

    def test_reference(self) -> None:
        assert descriptor_schema(parse_notation("{(#/defs/p)}")) == {"$ref": "#/defs/p"}
        assert descriptor_schema(parse_notation("{-(#/defs/p)}")) == {
            "anyOf": [{"$ref": "#/defs/p"}, {"type": "null"}]
        }


class TestJsonSchema:
    def test_object_document(self, cache: DecodeCache) -> None:
        document = json_schema({"name": "$", "age": "0?", "gone": "~"}, cache=cache)
        assert document == {
            "$schema": JSON_SCHEMA_DRAFT,
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "age": {"type": "integer"},
                "gone": False,
            },
            "required": ["name"],
        }

    def test_array_document(self, cache: DecodeCache) -> None:
        assert json_schema(["#"], cache=cache) == {
            "$schema": JSON_SCHEMA_DRAFT,
            "type": "array",
            "items": {"type": "number"},
        }

    def test_wildcard(self, cache: DecodeCache) -> None:
        document = json_schema({"*": "$"}, cache=cache)
        assert document["type"] == "object"
        assert document["additionalProperties"] == {"type": "string"}

    def test_nested_schema_is_required(self, cache: DecodeCache) -> None:
        document = json_schema({"meta": {"tag": "$?"}}, cache=cache)
        assert document["required"] == ["meta"]
        assert document["properties"]["meta"] == {
            "type": "object",
            "properties": {"tag": {"type": "string"}},
        }

    def test_whole_value_string(self, cache: DecodeCache) -> None:
        assert json_schema("$>1", cache=cache) == {
            "$schema": JSON_SCHEMA_DRAFT,
            "type": "string",
            "minLength": 2,
        }

    def test_whole_value_undefined(self, cache: DecodeCache) -> None:
        assert json_schema("~", cache=cache) == {"$schema": JSON_SCHEMA_DRAFT, "not": {}}
