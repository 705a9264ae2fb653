"""Exceptions for schema-authoring errors.

Data mismatches are never raised; they come back as a failed
:class:`~shapecheck.domain.result.ValidationResult`. Only schemas that
cannot be understood at all raise.
"""

from __future__ import annotations


class ShapecheckError(Exception):
    """Base exception for shapecheck errors."""


class NotationError(ShapecheckError):
    """A notation string could not be decoded (bad enum literal, bad prefix)."""

    def __init__(self, notation: str, reason: str) -> None:
        super().__init__(f"Invalid notation {notation!r}: {reason}")
        self.notation = notation
        self.reason = reason


class SchemaError(ShapecheckError):
    """A raw schema has a shape the normalizer cannot expand."""
