"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from reachctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from reachctl.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode: one identifier per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if items and isinstance(items, list):
        ids = (_extract_id(item) for item in items)
        return "\n".join(i for i in ids if i is not None)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str | None:
    if isinstance(item, dict):
        val = item.get("id")
        return None if val is None else str(val)
    return str(item)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "reach.ok"), (f"  {result.op}", "reach.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "reach.id" if key in ("root", "roots") else ""
    console.print(Text.assemble((f"  {key}: ", "reach.key"), (str(value), style)))


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
            console.print(f"    {k}: {escape(str(v))}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {escape(str(name))}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "reach.error"), (f"  {result.op}", "reach.op"), " — ", msg)
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {escape(str(v))}")


# ── Traversal renderers ───────────────────────────────────────────────


def _render_node_set(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render reach/closure results as a sorted node list."""
    _status_line(console, result)
    d = result.data
    if "roots" in d:
        _field(console, "roots", ", ".join(d["roots"]))
    else:
        _field(console, "root", d.get("root", ""))
    _field(console, "order", d.get("order", ""))
    console.print()
    for node in d.get("items", []):
        console.print(f"  [reach.id]{escape(str(node))}[/reach.id]")
    console.print(f"\n{d.get('count', 0)} reachable")
    if verbose:
        _render_meta(console, result)


def _render_walk(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a walk as a numbered visitation table."""
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Step", style="reach.step", justify="right")
    table.add_column("Node", style="reach.id", no_wrap=True)
    for item in d.get("items", []):
        table.add_row(str(item.get("step", "")), Text(str(item.get("id", ""))))
    console.print(table)

    root = escape(str(d.get("root", "")))
    console.print(f"\nRoot: [reach.id]{root}[/reach.id] ({d.get('order', '')})")
    console.print(f"{d.get('count', 0)} visited, peak frontier {d.get('peak_frontier', 0)}")
    if verbose:
        _render_meta(console, result)


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results with issues grouped by category."""
    d = result.data
    issues: list[dict[str, Any]] = d.get("issues", [])
    console.print(
        f"{d.get('nodes', 0)} nodes ({d.get('keyed_nodes', 0)} keyed), {d.get('edges', 0)} edges"
    )

    shown = [i for i in issues if verbose or i.get("severity") != "info"]
    if not shown:
        console.print("[reach.ok]OK[/reach.ok]  No issues found.")
        return

    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in shown:
        by_category.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print(f"\n[bold]{cat}[/bold]")
        for issue in cat_issues:
            sev = str(issue.get("severity", "warning"))
            style = f"reach.severity.{sev}"
            node = escape(f"[{issue.get('node', '')}]")
            msg = escape(str(issue.get("message", "")))
            console.print(f"  [{style}]{sev}[/{style}] {node}: {msg}")

    warnings = sum(1 for i in issues if i.get("severity") == "warning")
    console.print(f"\n{warnings} warnings, {len(issues) - warnings} notes")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "reach": _render_node_set,
    "closure": _render_node_set,
    "walk": _render_walk,
    "check": _render_check,
}
