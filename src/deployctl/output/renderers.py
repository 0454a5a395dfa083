"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from deployctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from deployctl.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    # Environment lists print one name per line
    envs = result.data.get("envs")
    if envs and isinstance(envs, list):
        return "\n".join(str(env) for env in envs)

    name = result.data.get("name")
    if name is not None:
        return str(name)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="deploy.ok")
    op = Text(f"  {result.op}", style="deploy.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="deploy.key")
    if key == "name":
        v = Text(str(value), style="deploy.name")
    elif key == "path":
        v = Text(str(value), style="deploy.path")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="deploy.error")
    op = Text(f"  {result.op}", style="deploy.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_project(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render project_show/add_env results: name, count, environment table."""
    _status_line(console, result)
    _field(console, "name", result.data.get("name", ""))
    _field(console, "count", result.data.get("count", 0))

    envs = result.data.get("envs") or []
    if not envs:
        console.print(Text("  (no environments)", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Environment", style="deploy.env")
    for position, env in enumerate(envs, start=1):
        table.add_row(str(position), Text(str(env)))
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "project_show": _render_project,
    "add_env": _render_project,
    "app_name": _render_generic,
}
