"""Human-readable rendering of identifier results.

Each op gets a small Rich renderer (id lists for generate and sort, a
field table for inspect and build, a one-line relation for compare);
anything else falls back to key: value lines.  Output is built on a
StringIO console and returned as text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from nsid.output.console import create_console, get_output, style_for_field

if TYPE_CHECKING:
    from rich.console import Console

    from nsid.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: bare identifiers or a relation."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if isinstance(data.get("ids"), list):
        return "\n".join(data["ids"])
    if "relation" in data:
        return str(data["relation"])
    if "id" in data:
        return str(data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="nsid.ok"), Text(f"  {result.op}", style="nsid.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="nsid.key")
    v = Text(str(value), style=style_for_field(key))
    console.print(k, v, sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="nsid.warning"), Text(warning), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with timings."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    line = Text(prefix)
    line.append(f"{duration:>8.3f}ms", style="yellow" if duration > 100 else "dim")
    line.append(f"  {name}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append(f"  ({', '.join(f'{ak}={av}' for ak, av in annotations.items())})")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="nsid.error"),
        Text(f"  {result.op}", style="nsid.op"),
        Text(" — "),
        Text(msg),
        sep="",
    )
    if err:
        _field(console, "code", err.code)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_id_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render generate/sort results: one identifier per line."""
    _status_line(console, result)
    if "namespace" in result.data:
        _field(console, "namespace", result.data["namespace"])
    for value in result.data.get("ids", []):
        console.print(Text("  "), Text(value, style="nsid.id"), sep="")
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render inspect/build results as a two-column field table."""
    _status_line(console, result)
    table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 2))
    table.add_column("Field", style="nsid.key", no_wrap=True)
    table.add_column("Value", no_wrap=True)
    for key, value in result.data.items():
        table.add_row(f"  {key}", Text(str(value), style=style_for_field(key)))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    line = Text("  ")
    line.append(str(d.get("left", "")), style="nsid.id")
    line.append(f"  is {d.get('relation', '?')}  ", style="bold")
    line.append(str(d.get("right", "")), style="nsid.id")
    console.print(line)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "generate": _render_id_list,
    "sort": _render_id_list,
    "inspect": _render_fields,
    "build": _render_fields,
    "compare": _render_compare,
    "validate": _render_generic,
}
