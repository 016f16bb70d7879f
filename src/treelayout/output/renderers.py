"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Every op a service emits has an entry in the dispatch table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from treelayout.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from treelayout.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tl.ok")
    op = Text(f"  {result.op}", style="tl.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tl.key")
    v = Text(str(value), style="tl.path" if key == "path" else "")
    console.print(k, v, sep="")


def _format_box(box: dict[str, Any] | None) -> str:
    if box is None:
        return "(none)"
    return (
        f"offset [{box['min_offset']}, {box['max_offset']}]  "
        f"depth [{box['min_depth']}, {box['max_depth']}]"
    )


def _vertex_table(vertices: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Index", style="tl.index", justify="right", no_wrap=True)
    table.add_column("Depth", style="tl.coord", justify="right")
    table.add_column("Offset", style="tl.coord", justify="right")
    for vertex in vertices:
        table.add_row(str(vertex["index"]), str(vertex["depth"]), str(vertex["offset"]))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tl.error")
    op = Text(f"  {result.op}", style="tl.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg), soft_wrap=True)

    if err is None:
        return
    # Bounds issues are listed regardless of verbosity.
    for issue in err.detail.get("errors", []):
        console.print(Text(f"  error: {issue}"), soft_wrap=True)
    if verbose:
        other = {k: v for k, v in err.detail.items() if k != "errors"}
        if other:
            console.print(Text("  detail:", style="dim"))
            for k, v in other.items():
                console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(
        Text("OK", style="tl.ok"),
        Text(f"  {result.data.get('size', 0)} vertices inside bounding box"),
    )
    if verbose:
        _field(console, "path", result.data.get("path", ""))


def _render_bounds(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    if verbose:
        _field(console, "path", data.get("path", ""))
    _field(console, "size", data.get("size", 0))
    _field(console, "stored", _format_box(data.get("stored")))
    _field(console, "recomputed", _format_box(data.get("recomputed")))
    _field(console, "matches", data.get("matches"))
    if data.get("written"):
        _field(console, "written", True)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    if verbose:
        _field(console, "path", data.get("path", ""))
    _field(console, "size", data.get("size", 0))
    _field(console, "bounds", _format_box(data.get("bounds")))
    vertices = data.get("vertices", [])
    if vertices:
        console.print(_vertex_table(vertices))


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "bounds": _render_bounds,
    "show": _render_show,
}
