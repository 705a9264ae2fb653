"""Command group: convert schemas to other formats."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shapecheck.commands._base import ShapeGroup, require_one_schema, schema_source_options

if TYPE_CHECKING:
    from shapecheck.commands._context import AppContext


@click.group(
    cls=ShapeGroup,
    examples="""\
  shapecheck emit json-schema --schema order.schema.json
  shapecheck --json emit json-schema --notation '$>2'""",
)
def emit() -> None:
    """Convert a schema into another schema format."""


@emit.command(
    "json-schema",
    examples="""\
  shapecheck emit json-schema -s order.schema.yaml > order.schema.json
  shapecheck emit json-schema -n '$=["draft","final"]='""",
)
@schema_source_options
@click.pass_obj
def json_schema_cmd(app: AppContext, schema_path: Path | None, notation: str | None) -> None:
    """Emit a draft-07 JSON Schema document."""
    require_one_schema(schema_path, notation)
    app.emit(app.service.emit_json_schema(schema_path=schema_path, notation=notation))
