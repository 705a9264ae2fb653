"""Command: decode one notation string."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shapecheck.commands._base import ShapeCommand

if TYPE_CHECKING:
    from shapecheck.commands._context import AppContext


@click.command(
    cls=ShapeCommand,
    examples="""\
  shapecheck decode '$?'
  shapecheck decode '#>0<1.5'
  shapecheck --json decode '$=["red","green"]='
  shapecheck decode '{(#/defs/address)}'""",
)
@click.argument("notation")
@click.pass_obj
def decode(app: AppContext, notation: str) -> None:
    """Show the type descriptor for NOTATION."""
    app.emit(app.service.decode(notation))
