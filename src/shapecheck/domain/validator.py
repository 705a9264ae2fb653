"""Validator engine — walks a canonical model against a value.

The walk visits model keys in insertion order and stops at the first
failure anywhere, including inside nested schemas and resolved
references. Data mismatches come back as a failed
:class:`ValidationResult`; only undecodable schemas raise.

Reference hops are guarded: re-entering the same reference for the same
value is reported as ``reference_cycle``, and more than
``max_depth`` nested hops as ``depth_exceeded``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, NoReturn

from shapecheck.domain.descriptor import (
    CanonicalModel,
    NestedSchema,
    Selector,
    TypeDescriptor,
)
from shapecheck.domain.errors import SchemaError
from shapecheck.domain.kinds import UNDEFINED, classify, kind_matches, strict_equal
from shapecheck.domain.normalize import normalize
from shapecheck.domain.notation import DEFAULT_CACHE, DecodeCache
from shapecheck.domain.references import format_ref, resolve
from shapecheck.domain.result import ValidateOptions, ValidationResult
from shapecheck.domain.types import (
    LENGTH_BOUNDED,
    VALUE_BOUNDED,
    FailureCode,
    Kind,
    SelectorKind,
)

logger = logging.getLogger(__name__)

# Every property value of a raw schema must itself be a notation string.
META_SCHEMA: dict[str, str] = {"*": "$"}


class Validator:
    """Validation engine owning a decode cache.

    Independent instances with their own caches never interfere; the
    module-level :func:`validate` shares the process-wide cache.
    """

    def __init__(
        self,
        *,
        cache: DecodeCache | None = None,
        options: ValidateOptions | None = None,
    ) -> None:
        self.cache = DecodeCache() if cache is None else cache
        self.options = options or ValidateOptions()

    def validate(
        self,
        value: Any,
        schema: Any,
        definitions: Mapping[str, Any] | None = None,
        options: ValidateOptions | Mapping[str, Any] | None = None,
    ) -> ValidationResult:
        """Validate *value* against the raw *schema*.

        Args:
            value: Any nested combination of dicts, lists, and scalars.
            schema: Notation string, one-element list, or mapping.
            definitions: Table that ``(#/a/b)`` references resolve against.
            options: Overrides the instance options for this call.

        Raises:
            NotationError: A notation string in *schema* cannot be decoded.
            SchemaError: *schema* is not a usable raw schema.
        """
        opts = _coerce_options(options) if options is not None else self.options
        if opts.validate_model:
            precheck = _Walk(self.cache, None, opts, step="model").run(schema, META_SCHEMA)
            if not precheck.ok:
                return precheck
        return _Walk(self.cache, definitions, opts, step="object").run(value, schema)


def validate(
    value: Any,
    schema: Any,
    definitions: Mapping[str, Any] | None = None,
    options: ValidateOptions | Mapping[str, Any] | None = None,
) -> ValidationResult:
    """Validate *value* against *schema* using the process-wide decode cache."""
    return Validator(cache=DEFAULT_CACHE).validate(value, schema, definitions, options)


def _coerce_options(options: ValidateOptions | Mapping[str, Any]) -> ValidateOptions:
    if isinstance(options, ValidateOptions):
        return options
    return ValidateOptions.model_validate(dict(options))


class _Failure(Exception):
    """Unwinds the walk on the first failure."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(result.message)
        self.result = result


@dataclass(frozen=True)
class _Site:
    """Where a check happens: the container, its model, and the item's address."""

    obj: Any
    model: CanonicalModel
    label: str
    path: str


class _Walk:
    """State for one pass over a value: definitions, guard set, step name."""

    def __init__(
        self,
        cache: DecodeCache,
        definitions: Mapping[str, Any] | None,
        options: ValidateOptions,
        *,
        step: str,
    ) -> None:
        self.cache = cache
        self.definitions = definitions
        self.options = options
        self.step = step
        self._active: set[tuple[tuple[str, ...], int]] = set()

    def run(self, value: Any, schema: Any) -> ValidationResult:
        model = normalize(schema, cache=self.cache)
        try:
            self._walk_model(value, model, path="", label="", depth=0)
        except _Failure as failure:
            result = failure.result
            logger.debug(
                "Validation failed at %s (%s): %s",
                result.path or "/",
                result.code,
                result.message,
            )
            return result
        return ValidationResult(ok=True, obj=value, model=model, step=self.step)

    def _walk_model(
        self, value: Any, model: CanonicalModel, *, path: str, label: str, depth: int
    ) -> None:
        for selector, entry in model.walk_order():
            for item_label, item, item_path in _select(value, selector, path, label):
                site = _Site(obj=value, model=model, label=item_label, path=item_path)
                if isinstance(entry, NestedSchema):
                    self._check_nested(site, entry, item, depth)
                else:
                    self._check(site, entry, item, depth)

    def _check(self, site: _Site, desc: TypeDescriptor, item: Any, depth: int) -> None:
        if item is UNDEFINED:
            if desc.optional:
                return
            if desc.type is not Kind.UNDEFINED:
                self._fail(site, FailureCode.MISSING_PROPERTY, f"Missing property `{site.label}`")

        if not kind_matches(desc.type, item, nullable=desc.nullable):
            self._fail(
                site,
                FailureCode.TYPE_MISMATCH,
                f"Property `{site.label}` should be type `{desc.type}` "
                f"but it is type `{classify(item)}`",
            )
        if item is None and desc.nullable:
            return

        if desc.type in LENGTH_BOUNDED:
            self._check_bounds(site, desc, len(item), FailureCode.LENGTH_BOUND, "length")
        elif desc.type in VALUE_BOUNDED:
            self._check_bounds(site, desc, item, FailureCode.VALUE_BOUND, "value")

        if desc.enum and not any(strict_equal(item, member) for member in desc.enum):
            self._fail(
                site,
                FailureCode.ENUM_MISMATCH,
                f"Property `{site.label}` value {item!r} does not match any enum value",
            )

        if desc.ref is not None:
            self._follow(site, desc.ref, item, depth)

    def _check_bounds(
        self, site: _Site, desc: TypeDescriptor, measured: Any, code: FailureCode, what: str
    ) -> None:
        # Both bounds are exclusive.
        if desc.min is not None and not measured > desc.min:
            self._fail(
                site,
                code,
                f"Property `{site.label}` {what} {measured} should be greater than {desc.min}",
            )
        if desc.max is not None and not measured < desc.max:
            self._fail(
                site,
                code,
                f"Property `{site.label}` {what} {measured} should be less than {desc.max}",
            )

    def _check_nested(self, site: _Site, nested: NestedSchema, item: Any, depth: int) -> None:
        if item is UNDEFINED:
            self._fail(site, FailureCode.MISSING_PROPERTY, f"Missing property `{site.label}`")
        if nested.is_object and classify(item) is not Kind.OBJECT:
            self._fail(
                site,
                FailureCode.TYPE_MISMATCH,
                f"Property `{site.label}` should be type `{Kind.OBJECT}` "
                f"but it is type `{classify(item)}`",
            )
        inner = normalize(nested.raw, cache=self.cache)
        self._walk_model(item, inner, path=site.path, label=site.label, depth=depth)

    def _follow(self, site: _Site, ref: tuple[str, ...], item: Any, depth: int) -> None:
        ref_text = format_ref(ref)
        schema = resolve(ref, self.definitions)
        if schema is None:
            self._fail(
                site,
                FailureCode.MISSING_REFERENCE,
                f"Missing reference `{ref_text}` for property `{site.label}`",
            )
        if depth >= self.options.max_depth:
            self._fail(
                site,
                FailureCode.DEPTH_EXCEEDED,
                f"Reference `{ref_text}` exceeds maximum depth {self.options.max_depth}",
            )
        key = (ref, id(item))
        if key in self._active:
            self._fail(
                site,
                FailureCode.REFERENCE_CYCLE,
                f"Reference cycle at `{ref_text}` for property `{site.label}`",
            )
        try:
            inner = normalize(schema, cache=self.cache)
        except SchemaError:
            self._fail(
                site,
                FailureCode.MISSING_REFERENCE,
                f"Reference `{ref_text}` for property `{site.label}` is not a schema",
            )
        self._active.add(key)
        try:
            self._walk_model(item, inner, path=site.path, label=site.label, depth=depth + 1)
        finally:
            self._active.discard(key)

    def _fail(self, site: _Site, code: FailureCode, message: str) -> NoReturn:
        raise _Failure(
            ValidationResult(
                ok=False,
                obj=site.obj,
                model=site.model,
                step=self.step,
                message=message,
                path=site.path,
                code=code,
            )
        )


def _select(
    value: Any, selector: Selector, path: str, label: str
) -> Iterator[tuple[str, Any, str]]:
    """Yield ``(label, item, path)`` for each value *selector* picks."""
    if selector.kind is SelectorKind.SELF:
        yield label, value, path
    elif selector.kind is SelectorKind.NAMED:
        item = value.get(selector.key, UNDEFINED) if isinstance(value, Mapping) else UNDEFINED
        yield selector.key, item, f"{path}/{_escape(selector.key)}"
    else:
        yield from _children(value, path)


def _children(value: Any, path: str) -> Iterator[tuple[str, Any, str]]:
    if isinstance(value, Mapping):
        for key, item in value.items():
            yield str(key), item, f"{path}/{_escape(str(key))}"
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield str(index), item, f"{path}/{index}"


def _escape(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")
