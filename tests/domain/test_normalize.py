"""Tests for the model normalizer and canonical model."""

import pytest

from shapecheck.domain.descriptor import CanonicalModel, NestedSchema, Selector, TypeDescriptor
from shapecheck.domain.errors import SchemaError
from shapecheck.domain.normalize import normalize
from shapecheck.domain.notation import DecodeCache
from shapecheck.domain.types import Kind, SelectorKind


class TestNormalizeForms:
    def test_string_schema_targets_whole_value(self, cache: DecodeCache) -> None:
        model = normalize("$?", cache=cache)
        assert list(model) == [""]
        assert model[""].type is Kind.STRING
        assert model.selector("").kind is SelectorKind.SELF

    def test_array_schema(self, cache: DecodeCache) -> None:
        model = normalize(["#"], cache=cache)
        assert list(model) == ["", "[]"]
        assert model[""].type is Kind.ARRAY
        assert model["[]"].type is Kind.NUMBER
        assert model.selector("[]").kind is SelectorKind.ELEMENTS

    @pytest.mark.parametrize("raw", [[], ["$", "#"]])
    def test_array_schema_needs_one_element(self, raw: list[str], cache: DecodeCache) -> None:
        with pytest.raises(SchemaError, match="exactly one element"):
            normalize(raw, cache=cache)

    def test_mapping_keeps_key_order(self, cache: DecodeCache) -> None:
        model = normalize({"b": "$", "a": "#", "*": "b"}, cache=cache)
        assert list(model) == ["b", "a", "*"]
        assert [sel.kind for sel, _ in model.walk_order()] == [
            SelectorKind.NAMED,
            SelectorKind.NAMED,
            SelectorKind.ALL_VALUES,
        ]

    def test_nested_schemas_stay_raw(self, cache: DecodeCache) -> None:
        inner = {"c": "$"}
        model = normalize({"a": inner, "b": ["#"]}, cache=cache)
        assert model["a"] == NestedSchema(raw=inner, name="a")
        assert model["a"].is_object
        assert not model["b"].is_object
        assert "$" not in cache

    def test_unsupported_root(self, cache: DecodeCache) -> None:
        with pytest.raises(SchemaError, match="Unsupported schema type: int"):
            normalize(5, cache=cache)

    def test_unsupported_property_value(self, cache: DecodeCache) -> None:
        with pytest.raises(SchemaError, match="`a`"):
            normalize({"a": 5}, cache=cache)

    def test_non_string_key(self, cache: DecodeCache) -> None:
        with pytest.raises(SchemaError):
            normalize({1: "$"}, cache=cache)


class TestSharedDescriptors:
    def test_same_notation_same_descriptor(self, cache: DecodeCache) -> None:
        model = normalize({"a": "$?", "b": "$?"}, cache=cache)
        assert model["a"] is model["b"]
        assert model["b"].name == "a"

    def test_models_share_across_calls(self, cache: DecodeCache) -> None:
        first = normalize({"x": "#>1"}, cache=cache)
        second = normalize(["#>1"], cache=cache)
        assert first["x"] is second["[]"]


class TestSelector:
    @pytest.mark.parametrize(
        "raw,kind,key",
        [
            ("", SelectorKind.SELF, ""),
            ("[]", SelectorKind.ELEMENTS, "[]"),
            ("*", SelectorKind.ALL_VALUES, "*"),
            ("name", SelectorKind.NAMED, "name"),
            ("\\*", SelectorKind.NAMED, "*"),
            ("\\[]", SelectorKind.NAMED, "[]"),
        ],
    )
    def test_parse(self, raw: str, kind: SelectorKind, key: str) -> None:
        assert Selector.parse(raw) == Selector(kind, key)


class TestCanonicalModel:
    def test_to_dict(self, cache: DecodeCache) -> None:
        model = normalize({"id": "0>0", "tags": ["$"], "p": "{(#/defs/p)}"}, cache=cache)
        data = model.to_dict()
        assert data["id"] == {
            "type": "integer",
            "optional": False,
            "nullable": False,
            "name": "id",
            "min": 0,
            "notation": "0>0",
        }
        assert data["tags"] == ["$"]
        assert data["p"]["ref"] == "#/defs/p"

    def test_is_a_mapping(self) -> None:
        model = CanonicalModel()
        model.add("a", TypeDescriptor(type=Kind.STRING))
        assert dict(model) == {"a": TypeDescriptor(type=Kind.STRING)}
        assert len(model) == 1
