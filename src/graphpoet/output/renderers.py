"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from graphpoet.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from graphpoet.services.result import ServiceResult

type _Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    The poem alone for ``compose``; one word per line for neighbor and
    bridge listings.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "compose":
        return str(result.data.get("poem", ""))

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("word", "")) for item in items)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="poet.ok"), Text(f"  {result.op}", style="poet.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="poet.key"), Text(str(value)), sep="", soft_wrap=True)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    line = Text(" " * indent)
    line.append(f"{span.get('duration_ms', 0.0):>8.2f}ms", style="dim")
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="poet.error"),
        Text(f"  {result.op}", style="poet.op"),
        Text(" — "),
        Text(msg),
        sep="",
        soft_wrap=True,
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Poem ──────────────────────────────────────────────────────────────


def _render_poem(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print the poem; with --verbose, also the inserted bridges."""
    console.print(Text(str(result.data.get("poem", ""))), soft_wrap=True)
    if not verbose:
        return

    bridges = result.data.get("bridges", [])
    if bridges:
        console.print()
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Left", style="poet.word")
        table.add_column("Bridge", style="poet.bridge")
        table.add_column("Right", style="poet.word")
        table.add_column("Score", style="poet.weight", justify="right")
        for b in bridges:
            table.add_row(
                *(str(b[key]) for key in ("position", "left", "bridge", "right", "score"))
            )
        console.print(table)
    console.print(f"\n{result.data.get('count', len(bridges))} bridges")
    _render_meta(console, result)


# ── Graph ─────────────────────────────────────────────────────────────


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("corpus", "words", "vertices", "edges", "total_weight", "metric"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_neighbors(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    direction = "follow" if result.op == "graph_targets" else "precede"
    if not items:
        console.print(Text(f"No words {direction} '{result.data.get('word', '')}'"))
    else:
        table = Table(show_header=True, pad_edge=False, expand=False)
        table.add_column("Word", style="poet.word")
        table.add_column("Weight", style="poet.weight", justify="right")
        for item in items:
            table.add_row(str(item["word"]), str(item["weight"]))
        console.print(table)
        console.print(f"\n{result.data.get('count', len(items))} words")
    if verbose:
        _render_meta(console, result)


def _render_bridges(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items = d.get("items", [])
    total = d.get("total", len(items))
    if not total:
        console.print(Text(f"No bridge from '{d.get('left', '')}' to '{d.get('right', '')}'"))
    else:
        if items:
            table = Table(show_header=True, pad_edge=False, expand=False)
            table.add_column("Bridge", style="poet.bridge")
            table.add_column("In", justify="right")
            table.add_column("Out", justify="right")
            table.add_column("Score", style="poet.weight", justify="right")
            for item in items:
                table.add_row(
                    *(str(item[key]) for key in ("word", "in_weight", "out_weight", "score"))
                )
            console.print(table)
        shown = d.get("count", len(items))
        console.print(Text(f"\n{shown} of {total} bridges ({d.get('metric', '')})"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, _Renderer] = {
    "compose": _render_poem,
    "graph_stats": _render_stats,
    "graph_targets": _render_neighbors,
    "graph_sources": _render_neighbors,
    "graph_bridges": _render_bridges,
}
