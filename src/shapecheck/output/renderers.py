"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from shapecheck.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from shapecheck.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="shape.ok"), Text(f"  {result.op}", style="shape.op"))


def _field(console: Console, key: str, value: Any) -> None:
    style = "shape.kind" if key == "type" else "shape.path" if key == "path" else ""
    console.print(Text.assemble((f"  {key}: ", "shape.key"), (str(value), style)))


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


def _render_validate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "file", result.data.get("file", ""))
    keys = result.data.get("keys", [])
    _field(console, "checked", ", ".join(repr(k) for k in keys) or "(none)")


def _render_decode(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key in ("type", "optional", "nullable", "min", "max", "enum", "ref", "encoded"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_normalize(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="shape.path", no_wrap=True)
    table.add_column("Type", style="shape.kind")
    table.add_column("Flags")
    table.add_column("Notation", style="shape.notation")
    for key, entry in result.data.get("model", {}).items():
        if isinstance(entry, dict) and "type" in entry:
            flags = ", ".join(f for f in ("optional", "nullable") if entry.get(f))
            row = [repr(key), entry["type"], flags, entry.get("notation", "")]
        else:
            row = [repr(key), "nested", "", json.dumps(entry, separators=(",", ":"))]
        # Text cells keep notation brackets from being read as markup.
        table.add_row(*(Text(cell) for cell in row))
    console.print(table)


def _render_json_schema(result: ServiceResult, console: Console) -> None:
    document = json.dumps(result.data.get("schema", {}), indent=2)
    console.print(Syntax(document, "json", theme="ansi_dark", background_color="default"))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="shape.error"),
        Text(f"  {result.op}", style="shape.op"),
        Text(" — "),
        Text(msg),
    )
    if err and err.detail and (verbose or err.code == "VALIDATION_FAILED"):
        for key, value in err.detail.items():
            _field(console, key, value)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    telemetry = (result.meta or {}).get("telemetry")
    if not telemetry:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    prefix = " " * indent
    duration = span.get("duration_ms", 0.0)
    console.print(f"{prefix}[dim]{duration:>8.2f}ms[/dim]  {span.get('name', '?')}")
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "validate": _render_validate,
    "decode": _render_decode,
    "normalize": _render_normalize,
    "emit_json_schema": _render_json_schema,
}
