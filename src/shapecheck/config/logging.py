"""structlog configuration for shapecheck.

The engine logs through stdlib ``logging``; services log through
structlog. Both end up in one stderr handler, rendered for humans or as
JSON lines (``--log-json``). Context a service binds for the duration of
a call (``op``, ``file``) is merged into every record, including the
engine's stdlib records.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import EventDict, Processor

LOGGER_NAME = "shapecheck"


def render_pointer(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
    """Show the root JSON pointer (``""``) as ``/`` in ``path`` fields."""
    if event_dict.get("path") == "":
        event_dict["path"] = "/"
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        render_pointer,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route structlog and stdlib records to a single handler.

    Args:
        verbose: DEBUG for the ``shapecheck`` loggers; WARNING otherwise.
        log_json: Render JSON lines instead of console output.
        stream: Destination (default: ``sys.stderr``).

    Returns:
        The handler installed on the root logger, replacing any others.
    """
    out = stream or sys.stderr
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
