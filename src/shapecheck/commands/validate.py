"""Command: validate a data document against a schema."""

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
  shapecheck validate order.json --schema order.schema.json
  shapecheck validate count.json --notation '0>0<100'
  shapecheck validate tree.yaml -s tree.yaml -d defs.yaml
  shapecheck --json validate order.json -s order.schema.json --validate-model""",
)
@click.argument("data", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@schema_source_options
@click.option(
    "-d",
    "--definitions",
    "definition_paths",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Definitions table for (#/...) references. Repeatable; later files win.",
)
@click.option(
    "--validate-model/--no-validate-model",
    default=None,
    help="Check the schema against the meta-schema first.",
)
@click.pass_obj
def validate(
    app: AppContext,
    data: Path,
    schema_path: Path | None,
    notation: str | None,
    definition_paths: tuple[Path, ...],
    validate_model: bool | None,
) -> None:
    """Validate DATA (JSON or YAML) against a schema. Exits 1 on mismatch."""
    require_one_schema(schema_path, notation)
    app.emit(
        app.service.validate(
            data,
            schema_path=schema_path,
            notation=notation,
            definition_paths=definition_paths,
            validate_model=validate_model,
        )
    )
