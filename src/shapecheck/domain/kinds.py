"""Runtime kind classification and the kind match table.

Python values are classified into the same kinds a notation string can
name. Whether a value satisfies a descriptor's kind is decided by
:data:`MATCH_RULES`, a table over ``(expected, actual)`` pairs; pairs not
in the table never match.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

from shapecheck.domain.types import Kind


class _Undefined:
    """Marker for an absent property (there is no ``undefined`` in Python)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def classify(value: Any) -> Kind | str:
    """Return the runtime kind of *value*.

    ``None`` and lists are their own kinds, distinct from object. Integers
    and floats are both ``number``; integer-ness is a match rule, not a
    kind. Unrecognized types report their Python type name.
    """
    if value is UNDEFINED:
        return Kind.UNDEFINED
    if value is None:
        return Kind.NULL
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (int, float)):
        return Kind.NUMBER
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY
    if isinstance(value, Mapping):
        return Kind.OBJECT
    return type(value).__name__


def _always(value: Any) -> bool:
    return True


def _integral(value: Any) -> bool:
    if isinstance(value, float):
        return value.is_integer()
    return isinstance(value, int)


MATCH_RULES: dict[tuple[Kind, Kind | str], Callable[[Any], bool]] = {
    (Kind.STRING, Kind.STRING): _always,
    (Kind.BOOLEAN, Kind.BOOLEAN): _always,
    (Kind.NUMBER, Kind.NUMBER): _always,
    (Kind.INTEGER, Kind.NUMBER): _integral,
    (Kind.NULL, Kind.NULL): _always,
    (Kind.OBJECT, Kind.OBJECT): _always,
    (Kind.ARRAY, Kind.ARRAY): _always,
    (Kind.UNDEFINED, Kind.UNDEFINED): _always,
}

# Expected kinds that accept any actual kind.
WILDCARD_RULES: dict[Kind, Callable[[Any], bool]] = {
    Kind.VARIABLE: _always,
}


def kind_matches(expected: Kind, value: Any, *, nullable: bool = False) -> bool:
    """Check *value* against *expected* through the match table.

    ``None`` satisfies any nullable descriptor.
    """
    actual = classify(value)
    if nullable and actual is Kind.NULL:
        return True
    rule = MATCH_RULES.get((expected, actual)) or WILDCARD_RULES.get(expected)
    return rule is not None and rule(value)


def strict_equal(left: Any, right: Any) -> bool:
    """Equality that never crosses kinds (``True`` is not ``1``).

    Arrays and objects compare by value, so ``[1]`` matches an enum
    member ``[1]`` even though the two are distinct objects.
    """
    return classify(left) == classify(right) and left == right
