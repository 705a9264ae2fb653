"""BaseService — shared foundation for shapecheck services.

Every service receives the resolved :class:`ShapecheckSettings` at
construction time and converts schema-authoring exceptions into failed
ServiceResults, so callers only ever branch on ``result.ok``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shapecheck.domain.errors import NotationError, SchemaError, ShapecheckError
from shapecheck.infrastructure.documents import DocumentLoadError
from shapecheck.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from shapecheck.config.settings import ShapecheckSettings

logger = logging.getLogger(__name__)

_ERROR_CODES: dict[type[ShapecheckError], ErrorCode] = {
    NotationError: ErrorCode.NOTATION_ERROR,
    SchemaError: ErrorCode.SCHEMA_ERROR,
    DocumentLoadError: ErrorCode.LOAD_ERROR,
}


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def decode(self, notation: str) -> ServiceResult:
                try:
                    ...
                except ShapecheckError as exc:
                    return self._failure("decode", exc)
    """

    def __init__(self, settings: ShapecheckSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: ShapecheckError) -> ServiceResult:
        """Convert a raised schema or load error into a failed result."""
        code = _ERROR_CODES.get(type(exc), ErrorCode.SHAPECHECK_ERROR)
        detail: dict[str, Any] = {}
        if isinstance(exc, NotationError):
            detail = {"notation": exc.notation, "reason": exc.reason}
        elif isinstance(exc, DocumentLoadError):
            detail = {"path": str(exc.path), "reason": exc.reason}
        logger.debug("%s failed with %s: %s", op, code, exc)
        return ServiceResult.failure(op, code, str(exc), detail)
