"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

from folio.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from folio.services.result import ServiceResult

Renderer = Callable[..., None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    if result.ok and result.op == "render_page" and "html" in result.data:
        # The document itself is the output; Rich would re-wrap it.
        return str(result.data["html"]).rstrip("\n")

    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: the permalink on success, one line on error."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    permalink = result.data.get("permalink")
    return str(permalink) if permalink else f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="folio.ok"), Text(f"  {result.op}", style="folio.op"))


def _field(console: Console, key: str, value: Any) -> None:
    styles = {"permalink": "folio.url", "path": "folio.path", "title": "folio.title"}
    label = Text(f"  {key}: ", style="folio.key")
    console.print(label, Text(str(value), style=styles.get(key, "")), sep="")


def _toc_tree(entries: list[dict[str, Any]], tree: Tree) -> Tree:
    for entry in entries:
        branch = tree.add(Text.assemble(entry["title"], (f" #{entry['id']}", "dim")))
        _toc_tree(entry.get("children", []), branch)
    return tree


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="folio.error")
    op = Text(f"  {result.op}", style="folio.op")
    console.print(label, op, Text(" — "), msg, markup=False)
    if err is not None:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if verbose and err.detail:
            console.print(Text("  detail:", style="dim"))
            for key, value in err.detail.items():
                console.print(f"    {key}: {value}", markup=False)


def _render_page(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a resolved page: identity, analytics, assets, outline."""
    data = result.data
    _status_line(console, result)
    for key in ("title", "slug", "path", "permalink", "date", "category"):
        if data.get(key) is not None:
            _field(console, key, data[key])
    if data.get("draft"):
        console.print(Text("  draft", style="folio.draft"))
    if data.get("tags"):
        _field(console, "tags", ", ".join(data["tags"]))
    _field(console, "words", f"{data.get('word_count', 0)} ({data.get('reading_time', 0)} min)")
    if data.get("summary") is not None:
        _field(console, "summary", "yes")
    if data.get("assets"):
        _field(console, "assets", len(data["assets"]))
        if verbose:
            for asset in data["assets"]:
                console.print(Text(f"    {asset}", style="folio.path"))
    if data.get("toc"):
        console.print(_toc_tree(data["toc"], Tree(Text("  toc", style="folio.key"))))
    if verbose:
        console.print()
        console.print(data.get("content", ""), markup=False)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


_OP_RENDERERS: dict[str, Renderer] = {
    "resolve_page": _render_page,
}
