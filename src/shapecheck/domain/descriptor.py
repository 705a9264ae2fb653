"""Type descriptors, selectors, and the canonical model.

A :class:`TypeDescriptor` is the decoded form of one notation string.
A :class:`CanonicalModel` is the normalized form of a whole raw schema:
an ordered mapping from raw key to descriptor (or to a nested raw schema
that is normalized lazily), with each key pre-parsed into a
:class:`Selector`.

INVARIANT: descriptors are immutable and may be shared between models.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from shapecheck.domain.types import Kind, SelectorKind


class TypeDescriptor(BaseModel):
    """Decoded notation string.

    Attributes:
        type: The kind named by the notation prefix.
        optional: ``?`` present; the value may be absent.
        nullable: ``-`` present; ``None`` is accepted in place of the kind.
        name: Property name of the first decode (the cache ignores names).
        min: Exclusive lower bound (length for string/array, value for numbers).
        max: Exclusive upper bound.
        enum: Allowed values, from an ``=[...]=`` literal.
        ref: Path segments of a ``(#/a/b)`` reference.
        notation: The exact source string.
    """

    model_config = {"frozen": True}

    type: Kind
    optional: bool = False
    nullable: bool = False
    name: str | None = None
    min: int | float | None = None
    max: int | float | None = None
    enum: tuple[Any, ...] | None = None
    ref: tuple[str, ...] | None = None
    notation: str = ""

    def summary(self) -> dict[str, Any]:
        """Return the set fields as a plain dict (for output)."""
        data = self.model_dump(mode="json", exclude_none=True)
        if self.ref is not None:
            data["ref"] = "#/" + "/".join(self.ref)
        return data


@dataclass(frozen=True)
class NestedSchema:
    """A nested raw schema carried unresolved inside a canonical model."""

    raw: Any
    name: str | None = None

    @property
    def is_object(self) -> bool:
        return isinstance(self.raw, Mapping)


@dataclass(frozen=True)
class Selector:
    """Parsed canonical-model key.

    ``''`` selects the value itself, ``'[]'`` each element, ``'*'`` every
    property value, anything else one named property. A leading backslash
    turns ``\\*`` and ``\\[]`` into literal property names.
    """

    kind: SelectorKind
    key: str = ""

    @classmethod
    def parse(cls, raw_key: str) -> Selector:
        if raw_key == "":
            return cls(SelectorKind.SELF)
        if raw_key == "[]":
            return cls(SelectorKind.ELEMENTS, "[]")
        if raw_key == "*":
            return cls(SelectorKind.ALL_VALUES, "*")
        if raw_key.startswith("\\"):
            return cls(SelectorKind.NAMED, raw_key[1:])
        return cls(SelectorKind.NAMED, raw_key)


ModelEntry = TypeDescriptor | NestedSchema


class CanonicalModel(Mapping[str, ModelEntry]):
    """Ordered mapping from raw key to descriptor or nested schema."""

    def __init__(self) -> None:
        self._entries: dict[str, ModelEntry] = {}
        self._selectors: dict[str, Selector] = {}

    def add(self, raw_key: str, entry: ModelEntry) -> None:
        self._entries[raw_key] = entry
        self._selectors[raw_key] = Selector.parse(raw_key)

    def selector(self, raw_key: str) -> Selector:
        return self._selectors[raw_key]

    def walk_order(self) -> Iterator[tuple[Selector, ModelEntry]]:
        """Yield ``(selector, entry)`` pairs in insertion order."""
        for raw_key, entry in self._entries.items():
            yield self._selectors[raw_key], entry

    def __getitem__(self, raw_key: str) -> ModelEntry:
        return self._entries[raw_key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CanonicalModel({self._entries!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view: descriptors as dicts, nested schemas as raw."""
        out: dict[str, Any] = {}
        for raw_key, entry in self._entries.items():
            if isinstance(entry, TypeDescriptor):
                out[raw_key] = entry.summary()
            else:
                out[raw_key] = entry.raw
        return out
