"""
Rendering functions for faunaset output.

This module handles all pretty-printing and table formatting.
Core functions return data, this module makes it human-readable.
"""

from rich.table import Table
from rich.console import Console
from rich import box
from rich.markup import escape
from typing import List, Optional

from .domain import EventsPage, SetPage
from .events import CREATE, DELETE, UPDATE

console = Console()


def render_table(headers: List[str], rows: List[List[str]], title: Optional[str] = None) -> None:
    """
    Render a generic table with the given headers and rows.

    Args:
        headers: List of column headers
        rows: List of rows, where each row is a list of values
        title: Optional table title
    """
    if not rows:
        console.print("[yellow]No data to display.[/yellow]")
        return

    table = Table(
        title=escape(title) if title else None,
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[escape(str(val)) for val in row])

    console.print(table)


def _render_cursors(page) -> None:
    if page.before is not None:
        console.print(f"[dim]before: {escape(str(page.before))}[/dim]")
    if page.after is not None:
        console.print(f"[dim]after: {escape(str(page.after))}[/dim]")


def render_set_page(page: SetPage, title: Optional[str] = None) -> None:
    """Render a page of resource refs."""
    if page.empty:
        console.print("[yellow]Empty page.[/yellow]")
        _render_cursors(page)
        return

    rows = [[str(i + 1), ref] for i, ref in enumerate(page)]
    render_table(["#", "Resource"], rows, title=title or f"Resources ({page.size})")
    _render_cursors(page)


def render_events_page(page: EventsPage, title: Optional[str] = None) -> None:
    """Render a page of events."""
    if page.empty:
        console.print("[yellow]No events.[/yellow]")
        _render_cursors(page)
        return

    table = Table(
        title=escape(title) if title else f"Events ({page.size})",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Time", style="dim")
    table.add_column("Action")
    table.add_column("Resource", style="cyan")
    table.add_column("Set", style="dim")

    action_styles = {CREATE: 'green', DELETE: 'red', UPDATE: 'yellow'}
    for event in page:
        style = action_styles.get(event.action, 'white')
        table.add_row(
            event.ts.strftime('%Y-%m-%d %H:%M:%S.%f'),
            f"[{style}]{escape(str(event.action))}[/{style}]",
            escape(str(event.resource)),
            escape(str(event.set or "")),
        )

    console.print(table)
    _render_cursors(page)
