"""Tests for runtime kind classification and the match table."""

from datetime import date

import pytest

from shapecheck.domain.kinds import (
    MATCH_RULES,
    UNDEFINED,
    classify,
    kind_matches,
    strict_equal,
)
from shapecheck.domain.types import Kind


class TestClassify:
    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, Kind.NULL),
            (True, Kind.BOOLEAN),
            (0, Kind.NUMBER),
            (1.5, Kind.NUMBER),
            ("", Kind.STRING),
            ([], Kind.ARRAY),
            ((1, 2), Kind.ARRAY),
            ({}, Kind.OBJECT),
            (UNDEFINED, Kind.UNDEFINED),
        ],
    )
    def test_kinds(self, value: object, kind: Kind) -> None:
        assert classify(value) == kind

    def test_unknown_type_reports_type_name(self) -> None:
        assert classify(date(2024, 1, 1)) == "date"


class TestKindMatches:
    def test_integral_float_is_integer(self) -> None:
        assert kind_matches(Kind.INTEGER, 2.0)

    def test_fractional_float_is_not_integer(self) -> None:
        assert not kind_matches(Kind.INTEGER, 2.5)

    def test_bool_is_not_integer(self) -> None:
        assert not kind_matches(Kind.INTEGER, True)

    def test_integer_is_number(self) -> None:
        assert kind_matches(Kind.NUMBER, 3)

    def test_null_needs_nullable(self) -> None:
        assert not kind_matches(Kind.STRING, None)
        assert kind_matches(Kind.STRING, None, nullable=True)

    @pytest.mark.parametrize("value", [None, 1, "x", [], {}, date(2024, 1, 1)])
    def test_variable_matches_anything(self, value: object) -> None:
        assert kind_matches(Kind.VARIABLE, value)

    def test_undefined_matches_only_absence(self) -> None:
        assert kind_matches(Kind.UNDEFINED, UNDEFINED)
        assert not kind_matches(Kind.UNDEFINED, None)

    def test_table_never_crosses_kinds_except_integer(self) -> None:
        crossing = [(e, a) for (e, a) in MATCH_RULES if e != a]
        assert crossing == [(Kind.INTEGER, Kind.NUMBER)]


class TestStrictEqual:
    def test_same_kind_equal(self) -> None:
        assert strict_equal("a", "a")
        assert strict_equal(1, 1.0)

    def test_containers_compare_by_value(self) -> None:
        assert strict_equal([1], [1])
        assert strict_equal({"a": 1}, {"a": 1})
        assert not strict_equal([1], {"0": 1})

    def test_bool_is_not_one(self) -> None:
        assert not strict_equal(True, 1)

    def test_string_is_not_number(self) -> None:
        assert not strict_equal("1", 1)


class TestUndefined:
    def test_singleton_and_falsy(self) -> None:
        assert type(UNDEFINED)() is UNDEFINED
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"
