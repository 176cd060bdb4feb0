"""Rich formatting helpers for the git-branch-desc CLI.

Provides functions that format listings and edit outcomes for terminal
display. Rich auto-detects TTY and degrades gracefully when piped (no ANSI
codes). Every piece of user or repository text goes through escape() since
descriptions and commit messages routinely contain ``[...]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from branchdesc.formatting import MIN_WIDTH, first_line, terminal_width, wrap_text

if TYPE_CHECKING:
    from branchdesc.models.branch import BranchDescription
    from branchdesc.operations.edit import EditResult


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def format_descriptions_table(
    descriptions: list[BranchDescription],
    console: Console,
    width: int | None = None,
) -> None:
    """Display one row per branch with the first line of its description."""
    width = width or terminal_width()

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("BRANCH", style="green", no_wrap=True)
    table.add_column("DESCRIPTION", no_wrap=True, overflow="ellipsis")

    for desc in descriptions:
        room = max(MIN_WIDTH, width - len(desc.branch) - 10)
        summary = first_line(wrap_text(desc.description, room))
        table.add_row(escape(desc.branch), escape(summary))

    console.print(table)


def format_descriptions_detailed(
    descriptions: list[BranchDescription],
    console: Console,
    width: int | None = None,
) -> None:
    """Display every branch with its full, wrapped description."""
    width = width or terminal_width()

    for desc in descriptions:
        console.print(f"[bold]Branch:[/bold] [green]{escape(desc.branch)}[/green]")
        console.print("Description:")
        for line in wrap_text(desc.description, width).splitlines():
            console.print(f"  {escape(line)}", highlight=False, soft_wrap=True)
        console.print()


def format_no_descriptions(console: Console, include_all: bool) -> None:
    """Explain an empty listing."""
    if include_all:
        console.print("[dim]No branches found.[/dim]")
        return
    console.print("[dim]No branches with descriptions found.[/dim]")
    console.print("Use --all (-a) to show all branches including those without descriptions.")


def format_edit_result(result: EditResult, console: Console) -> None:
    """Display the outcome of an edit."""
    if result.cancelled:
        console.print("[yellow]Operation cancelled.[/yellow]")
        return

    if result.commit is not None:
        console.print(
            f"[green]Committed[/green] changes to branch '{escape(result.branch)}' "
            f"([yellow]{result.commit.commit_sha[:8]}[/yellow])",
            highlight=False,
            soft_wrap=True,
        )
        if result.commit.pushed:
            console.print(
                f"[green]Pushed[/green] changes to remote branch '{escape(result.branch)}'",
                highlight=False,
                soft_wrap=True,
            )

    console.print(
        f"{result.action} description for branch '{escape(result.branch)}'",
        highlight=False,
        soft_wrap=True,
    )

    if result.is_current and not result.committed:
        console.print("[dim]Use --commit (-c) to automatically commit the change[/dim]")
        console.print("[dim]Use --push (-p) to automatically commit and push the change[/dim]")


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
