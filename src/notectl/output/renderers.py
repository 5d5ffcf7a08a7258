"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from notectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from notectl.services.result import ServiceResult

NO_DATA = "No data yet"
BAR_WIDTH = 30


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
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)
    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="nc.ok"), Text(f"  {result.op}", style="nc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="nc.key")
    if key == "id":
        v = Text(str(value), style="nc.id")
    elif key in ("title", "name"):
        v = Text(str(value), style="nc.title")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _flags(item: dict[str, Any]) -> Text:
    text = Text()
    if item.get("pinned"):
        text.append("pinned", style="nc.pinned")
    if item.get("favorite"):
        if text:
            text.append(" ")
        text.append("favorite", style="nc.favorite")
    return text


def _day(timestamp: Any) -> str:
    """Date part of an ISO timestamp, for compact table cells."""
    if not timestamp:
        return ""
    return str(timestamp).split("T", 1)[0]


def _bar_chart(
    console: Console,
    title: str,
    rows: list[dict[str, Any]],
    *,
    label_key: str = "label",
) -> None:
    """Horizontal text bar chart; an explicit empty state when *rows* is empty."""
    console.print(f"\n[bold]{title}[/bold]")
    if not rows:
        console.print(f"  [nc.empty]{NO_DATA}[/nc.empty]")
        return

    peak = max(int(r.get("count", 0)) for r in rows) or 1
    table = Table(show_header=False, box=None, pad_edge=False, padding=(0, 1))
    table.add_column("Label", no_wrap=True)
    table.add_column("Bar", style="nc.bar")
    table.add_column("Count", justify="right")
    for row in rows:
        count = int(row.get("count", 0))
        bar = "█" * max(1, round(count / peak * BAR_WIDTH)) if count else ""
        table.add_row(Text(f"  {row.get(label_key, '')}"), bar, str(count))
    console.print(table)


def _metric_row(console: Console, metrics: list[dict[str, Any]]) -> None:
    parts = [f"[nc.key]{m['label']}:[/nc.key] [bold]{m['value']:,}[/bold]" for m in metrics]
    console.print("  " + "   ".join(parts))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 250 else "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="nc.error"), Text(f"  {result.op}", style="nc.op"), "—", Text(msg)
    )
    if verbose and err:
        console.print(f"  [nc.key]code:[/nc.key] {err.code}")
        for k, v in err.detail.items():
            console.print(f"  [nc.key]{k}:[/nc.key] {v}")


# ── Account renderers ─────────────────────────────────────────────────


def _render_account(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render signin/signup/whoami/profile results."""
    _status_line(console, result)
    d = result.data
    for key in ("id", "name", "email", "role", "created_at", "last_login"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if d.get("role") == "admin":
        console.print("  [nc.admin]administrator[/nc.admin]")
    if d.get("message"):
        console.print(f"\n{d['message']}")
    if verbose:
        _render_meta(console, result)


def _render_message(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if result.data.get("message"):
        console.print(f"  {result.data['message']}")
    elif result.op == "signout":
        state = "Signed out." if result.data.get("signed_out") else "Already signed out."
        console.print(f"  {state}")


# ── Note renderers ────────────────────────────────────────────────────


def _render_note_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the notes dashboard listing."""
    d = result.data
    items = d.get("items", [])
    if not items:
        if d.get("filtered"):
            console.print("[nc.empty]No notes match the current filters.[/nc.empty]")
        else:
            console.print("[nc.empty]No notes found.[/nc.empty]")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="nc.id", no_wrap=True, justify="right")
    table.add_column("Title", style="nc.title")
    table.add_column("Tags", style="nc.tag")
    table.add_column("Flags")
    table.add_column("Created", style="dim", no_wrap=True)
    if verbose:
        table.add_column("Updated", style="dim", no_wrap=True)
        table.add_column("Attachments", justify="right")

    for item in items:
        row: list[Any] = [
            str(item.get("id", "")),
            Text(str(item.get("title", ""))),
            Text(", ".join(item.get("tags") or [])),
            _flags(item),
            _day(item.get("created_at")),
        ]
        if verbose:
            row.append(_day(item.get("updated_at")))
            row.append(str(len(item.get("attachments") or [])))
        table.add_row(*row)

    console.print(table)
    view = d.get("view", "all")
    suffix = "" if view == "all" else f" ({view}, {d.get('fetched', len(items))} fetched)"
    console.print(f"\n{d.get('count', len(items))} notes{suffix}")


def _render_single_note(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one note as a panel with metadata, description, and attachments."""
    d = result.data
    lines: list[str] = []
    owner = d.get("owner") or {}
    if owner:
        lines.append(f"owner: {owner.get('name', '')} <{owner.get('email', '')}>")
    for key in ("created_at", "updated_at"):
        if d.get(key):
            lines.append(f"{key.split('_')[0]}: {d[key]}")
    if d.get("tags"):
        lines.append(f"tags: {', '.join(d['tags'])}")
    flags = _flags(d).plain
    if flags:
        lines.append(f"flags: {flags}")

    content = "\n".join(lines)
    if d.get("description"):
        content += f"\n\n{d['description'].strip()}"
    attachments = d.get("attachments") or []
    if attachments:
        content += "\n\nattachments:\n" + "\n".join(f"  {url}" for url in attachments)

    title = f"{d.get('id', '?')} — {d.get('title', 'Untitled')}"
    console.print(Panel(Text(content), title=Text(title), border_style="dim", expand=False))


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create/update/delete/toggle results."""
    _status_line(console, result)
    for key in ("id", "title", "tags", "pinned", "favorite", "fields_changed"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_tags(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    tags = result.data.get("tags", [])
    if not tags:
        console.print("[nc.empty]No tags yet.[/nc.empty]")
        return
    for tag in tags:
        console.print(f"  [nc.tag]{tag}[/nc.tag]")
    console.print(f"\n{len(tags)} tags")


# ── Analytics renderers ───────────────────────────────────────────────


def _render_analytics(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render summary cards and the three chart panels."""
    d = result.data
    _metric_row(
        console,
        [
            {"label": "Total Notes", "value": d.get("total", 0)},
            {"label": "Pinned", "value": d.get("pinned", 0)},
            {"label": "Favorites", "value": d.get("favorites", 0)},
        ],
    )
    charts = d.get("charts", {})
    _bar_chart(console, "Top tags", charts.get("tags", []), label_key="tag")
    _bar_chart(console, "Weekly activity", charts.get("weekly", []))
    _bar_chart(console, "Monthly activity", charts.get("monthly", []))
    if verbose:
        sizes = d.get("series_sizes", {})
        console.print(
            f"\n  [nc.key]series:[/nc.key] {sizes.get('tags', 0)} tags, "
            f"{sizes.get('weekly', 0)} weeks, {sizes.get('monthly', 0)} months"
        )
        _render_meta(console, result)


def _render_admin_overview(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    d = result.data
    if not d.get("available"):
        console.print(f"[nc.empty]{d.get('message', 'No admin data available yet.')}[/nc.empty]")
        return

    console.print("[bold]Notes[/bold]")
    _metric_row(console, d.get("note_metrics", []))
    console.print("\n[bold]People[/bold]")
    _metric_row(console, d.get("people_metrics", []))

    _bar_chart(console, f"Notes timeline ({d.get('notes_range')})", d.get("notes_timeline", []))
    _bar_chart(console, f"User timeline ({d.get('users_range')})", d.get("users_timeline", []))

    users = d.get("users", [])
    console.print("\n[bold]Users[/bold]")
    if not users:
        console.print("  [nc.empty]No users yet.[/nc.empty]")
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Name", style="nc.title")
    table.add_column("Email")
    table.add_column("Notes", justify="right")
    table.add_column("Joined", style="dim", no_wrap=True)
    table.add_column("Last login", style="dim", no_wrap=True)
    table.add_column("Active")
    for user in users:
        if user.get("is_monthly_active"):
            active = "30d"
        elif user.get("is_yearly_active"):
            active = "12m"
        else:
            active = "—"
        table.add_row(
            Text(str(user.get("name", ""))),
            Text(str(user.get("email", ""))),
            str(user.get("note_count", 0)),
            _day(user.get("created_at")),
            _day(user.get("last_login")) or "—",
            active,
        )
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, dict):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Account
    "signup": _render_account,
    "signin": _render_account,
    "whoami": _render_account,
    "profile": _render_account,
    "update_email": _render_account,
    "signout": _render_message,
    "change_password": _render_message,
    # Notes
    "list_notes": _render_note_table,
    "get_note": _render_single_note,
    "create_note": _render_mutation,
    "update_note": _render_mutation,
    "delete_note": _render_mutation,
    "toggle_pin": _render_mutation,
    "toggle_favorite": _render_mutation,
    "list_tags": _render_tags,
    # Analytics
    "analytics": _render_analytics,
    "admin_overview": _render_admin_overview,
}
