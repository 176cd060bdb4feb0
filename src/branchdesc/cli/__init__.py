"""git-branch-desc CLI -- terminal interface for branch descriptions.

Entry point for the ``git-branch-desc`` console script. The library
(branchdesc/__init__.py) does not import click or this package.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from branchdesc._version import __version__
from branchdesc.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from branchdesc.repository import BranchRepository


class AliasedGroup(click.Group):
    """click Group that also resolves registered command aliases."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._aliases: dict[str, str] = {}

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias] = command_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is not None:
            return command
        target = self._aliases.get(cmd_name)
        return super().get_command(ctx, target) if target else None

    def resolve_command(self, ctx: click.Context, args: list[str]):
        # Report the canonical name so help and errors mention "edit", not "e".
        _, command, remaining = super().resolve_command(ctx, args)
        return (command.name if command else None), command, remaining


@click.group(cls=AliasedGroup)
@click.option(
    "--repo",
    "repo_path",
    default=".",
    envvar="GIT_BRANCH_DESC_REPO",
    show_default=True,
    help="Path inside the git repository to operate on.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
@click.version_option(__version__, prog_name="git-branch-desc")
@click.pass_context
def cli(ctx: click.Context, repo_path: str, verbose: bool) -> None:
    """Manage branch descriptions stored in BRANCHREADME.md files."""
    if verbose:
        logging.basicConfig(format="%(message)s", level=logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj["repo_path"] = repo_path


def _get_repository(ctx: click.Context) -> BranchRepository:
    """Open the BranchRepository named by the Click context."""
    from branchdesc.models.config import BranchDescConfig
    from branchdesc.repository import BranchRepository

    return BranchRepository.open(ctx.obj["repo_path"], config=BranchDescConfig.from_env())


@contextmanager
def _repository_session(ctx: click.Context) -> Iterator[tuple[BranchRepository, Console]]:
    """Context manager that opens the repository, yields (repo, console), and handles cleanup.

    Ensures the repository is closed on exit and formats exceptions as CLI
    errors with exit status 1.
    """
    console = get_console()
    try:
        repo = _get_repository(ctx)
        try:
            yield repo, console
        finally:
            repo.close()
    except (SystemExit, click.exceptions.Exit, click.Abort):
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from branchdesc.cli.commands.edit import edit  # noqa: E402
from branchdesc.cli.commands.list import list_descriptions  # noqa: E402

cli.add_command(edit)
cli.add_command(list_descriptions)
cli.add_alias("e", "edit")
cli.add_alias("ls", "list")
