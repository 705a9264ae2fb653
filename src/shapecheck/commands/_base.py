"""Custom Click base classes with --examples support.

ShapeCommand and ShapeGroup accept an ``examples`` parameter. When
``--examples`` is passed, the command prints usage examples and exits,
keeping ``--help`` concise.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ShapeCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ShapeGroup(click.Group):
    """Click Group whose subcommands default to :class:`ShapeCommand`."""

    command_class = ShapeCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def schema_source_options(func: Any) -> Any:
    """Add the mutually exclusive ``--schema`` / ``--notation`` pair."""
    func = click.option(
        "-n",
        "--notation",
        default=None,
        help="Inline notation string used as the whole-value schema.",
    )(func)
    func = click.option(
        "-s",
        "--schema",
        "schema_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Schema document (JSON or YAML).",
    )(func)
    return func


def require_one_schema(schema_path: Path | None, notation: str | None) -> None:
    """Raise a usage error unless exactly one schema source was given."""
    if (schema_path is None) == (notation is None):
        raise click.UsageError("Provide exactly one of --schema or --notation.")
