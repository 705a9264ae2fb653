"""Command: show the canonical model of a schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shapecheck.commands._base import ShapeCommand, require_one_schema, schema_source_options

if TYPE_CHECKING:
    from shapecheck.commands._context import AppContext


@click.command(
    cls=ShapeCommand,
    examples="""\
  shapecheck normalize --schema order.schema.json
  shapecheck --json normalize --notation '[]?'""",
)
@schema_source_options
@click.pass_obj
def normalize(app: AppContext, schema_path: Path | None, notation: str | None) -> None:
    """Show the canonical key-to-descriptor model of a schema."""
    require_one_schema(schema_path, notation)
    app.emit(app.service.normalize(schema_path=schema_path, notation=notation))
