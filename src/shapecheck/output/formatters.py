"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). ``--quiet`` reduces output to a single status line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from shapecheck.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from shapecheck.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags taken from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2, exclude_none=True)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
