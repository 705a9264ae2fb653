"""Subcommand modules for shapecheck.

Provides register_commands() which uses deferred imports to keep
``shapecheck --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the emit group and the standalone commands on the root group."""
    from shapecheck.commands.decode import decode
    from shapecheck.commands.emit import emit
    from shapecheck.commands.normalize import normalize
    from shapecheck.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(decode)
    cli.add_command(normalize)
    cli.add_command(emit)
