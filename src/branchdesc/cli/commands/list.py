"""git-branch-desc list -- show branch descriptions."""

from __future__ import annotations

import click

from branchdesc.cli.formatting import (
    format_descriptions_detailed,
    format_descriptions_table,
    format_no_descriptions,
)


@click.command(name="list")
@click.option("-d", "--detailed", is_flag=True, help="Show full, wrapped descriptions.")
@click.option("-a", "--all", "include_all", is_flag=True, help="Include branches without a description.")
@click.pass_context
def list_descriptions(ctx: click.Context, detailed: bool, include_all: bool) -> None:
    """List branch descriptions of local and remote branches.

    Local branches come first. A remote branch is hidden when a local
    branch of the same name exists.
    """
    from branchdesc.cli import _repository_session
    from branchdesc.operations.listing import collect_descriptions

    with _repository_session(ctx) as (repo, console):
        descriptions = collect_descriptions(repo, include_all=include_all)
        if not descriptions:
            format_no_descriptions(console, include_all)
        elif detailed:
            format_descriptions_detailed(descriptions, console)
        else:
            format_descriptions_table(descriptions, console)
