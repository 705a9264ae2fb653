"""Notation decoder, encoder, and the decode cache.

A notation string is a kind prefix followed by modifiers in any order::

    $  string     b  boolean    #  number     0  integer    !  null
    {  object     [  array      *  variable   ~  undefined

    ?      optional             -       nullable
    >N     exclusive minimum    <N      exclusive maximum
    =[..]= enum (JSON array)    (#/a/b) reference to a definition

Decoding happens once per distinct string; the result is memoized in a
:class:`DecodeCache`.

INVARIANT: a descriptor is a pure function of its notation string, so
concurrent first-writes to the same cache key are idempotent.
"""

from __future__ import annotations

import json
import re
from collections import OrderedDict
from typing import Any

from shapecheck.domain.descriptor import TypeDescriptor
from shapecheck.domain.errors import NotationError
from shapecheck.domain.types import BOUNDED, KIND_PREFIXES, PREFIX_KINDS, Kind

_ENUM_RE = re.compile(r"=\[(.*?)\]=", re.DOTALL)
_REF_RE = re.compile(r"\(#/([^)]*)\)")
_INT_BOUND_RE = {op: re.compile(re.escape(op) + r"(\d*)") for op in (">", "<")}
_FLOAT_BOUND_RE = {op: re.compile(re.escape(op) + r"([\d.]*)") for op in (">", "<")}


class DecodeCache:
    """Memo of decoded descriptors keyed by exact notation string.

    Unbounded by default. With *maxsize*, the oldest entry is evicted once
    the cache grows past it. Writes use ``setdefault`` so a racing
    duplicate decode yields the first stored descriptor, never a torn one.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        if maxsize is not None and maxsize < 1:
            raise ValueError("maxsize must be positive or None")
        self.maxsize = maxsize
        self._entries: OrderedDict[str, TypeDescriptor] = OrderedDict()

    def get(self, notation: str) -> TypeDescriptor | None:
        return self._entries.get(notation)

    def put(self, notation: str, descriptor: TypeDescriptor) -> TypeDescriptor:
        """Store *descriptor* unless one exists; return the stored one."""
        stored = self._entries.setdefault(notation, descriptor)
        if self.maxsize is not None and len(self._entries) > self.maxsize:
            self._entries.popitem(last=False)
        return stored

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, notation: object) -> bool:
        return notation in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Process-wide cache used when callers do not inject one.
DEFAULT_CACHE = DecodeCache()


def decode(raw: Any, name: str | None = None, *, cache: DecodeCache | None = None) -> Any:
    """Decode a notation string into a :class:`TypeDescriptor`.

    Non-string *raw* values (nested raw schemas) are returned unchanged.
    The cache ignores *name*: the stored descriptor keeps the name of the
    first property that decoded it.

    Raises:
        NotationError: Unknown prefix, malformed enum literal, empty
            reference path, or a bound operator without a number.
    """
    if not isinstance(raw, str):
        return raw
    store = DEFAULT_CACHE if cache is None else cache
    hit = store.get(raw)
    if hit is not None:
        return hit
    return store.put(raw, parse_notation(raw, name))


def parse_notation(notation: str, name: str | None = None) -> TypeDescriptor:
    """Parse *notation* without consulting any cache."""
    kind = _prefix_kind(notation)
    rest = notation

    enum: tuple[Any, ...] | None = None
    match = _ENUM_RE.search(rest)
    if match:
        enum = _parse_enum(notation, match.group(1))
        rest = rest[: match.start()] + rest[match.end() :]

    ref: tuple[str, ...] | None = None
    match = _REF_RE.search(rest)
    if match:
        ref = tuple(seg for seg in match.group(1).split("/") if seg)
        if not ref:
            raise NotationError(notation, "reference path is empty")
        rest = rest[: match.start()] + rest[match.end() :]

    lower, rest = _take_bound(notation, rest, ">", kind)
    upper, rest = _take_bound(notation, rest, "<", kind)

    bounded = kind in BOUNDED
    return TypeDescriptor(
        type=kind,
        optional="?" in rest,
        nullable="-" in rest,
        name=name,
        min=lower if bounded else None,
        max=upper if bounded else None,
        enum=enum,
        ref=ref,
        notation=notation,
    )


def _prefix_kind(notation: str) -> Kind:
    # Empty notation means null; kept for already-authored schemas.
    if not notation:
        return Kind.NULL
    first = notation[0]
    if first == "(":
        return Kind.VARIABLE
    kind = PREFIX_KINDS.get(first)
    if kind is None:
        raise NotationError(notation, f"unknown kind prefix {first!r}")
    return kind


def _parse_enum(notation: str, body: str) -> tuple[Any, ...]:
    try:
        values = json.loads(f"[{body}]")
    except json.JSONDecodeError as exc:
        raise NotationError(notation, f"enum literal is not a JSON array ({exc.msg})") from exc
    return tuple(values)


def _take_bound(
    notation: str, rest: str, op: str, kind: Kind
) -> tuple[int | float | None, str]:
    """Extract the first ``>N`` / ``<N`` bound and strip it from *rest*."""
    patterns = _FLOAT_BOUND_RE if kind is Kind.NUMBER else _INT_BOUND_RE
    match = patterns[op].search(rest)
    if match is None:
        return None, rest
    digits = match.group(1)
    if not digits:
        raise NotationError(notation, f"bound {op!r} needs a number")
    try:
        value: int | float = float(digits) if kind is Kind.NUMBER else int(digits)
    except ValueError as exc:
        raise NotationError(notation, f"bound {op}{digits} is not a number") from exc
    return value, rest[: match.start()] + rest[match.end() :]


def encode(descriptor: TypeDescriptor) -> str:
    """Render *descriptor* back into notation.

    The result decodes to a descriptor with the same kind and modifiers,
    though not necessarily the same text as ``descriptor.notation``.
    """
    parts = [KIND_PREFIXES[descriptor.type]]
    if descriptor.optional:
        parts.append("?")
    if descriptor.nullable:
        parts.append("-")
    if descriptor.min is not None:
        parts.append(f">{descriptor.min}")
    if descriptor.max is not None:
        parts.append(f"<{descriptor.max}")
    if descriptor.enum is not None:
        body = json.dumps(list(descriptor.enum), separators=(",", ":"))[1:-1]
        parts.append(f"=[{body}]=")
    if descriptor.ref is not None:
        parts.append("(#/" + "/".join(descriptor.ref) + ")")
    return "".join(parts)
