"""git-branch-desc edit -- set the description of a branch."""

from __future__ import annotations

import click
from rich.markup import escape

from branchdesc.cli.formatting import format_edit_result, format_error, get_console


@click.command()
@click.argument("description", required=False)
@click.option("-b", "--branch", default=None, help="Branch to edit (default: current branch).")
@click.option("--clipboard", is_flag=True, help="Read the description from the clipboard.")
@click.option("--stdin", "from_stdin", is_flag=True, help="Read the description from standard input.")
@click.option("--issue", default=None, metavar="REF", help="Use a GitLab issue (number or URL) as the description.")
@click.option("--ai-summarize", is_flag=True, help="Summarize clipboard, stdin or issue text with a local LLM.")
@click.option(
    "--ai-timeout",
    default=None,
    type=float,
    help="Seconds to wait for the summary (default: 120, or GIT_BRANCH_DESC_AI_TIMEOUT).",
)
@click.option("-c", "--commit", is_flag=True, help="Commit the change.")
@click.option("-p", "--push", is_flag=True, help="Commit and push the change.")
@click.option("-f", "--force", is_flag=True, help="Do not ask before editing another branch.")
@click.pass_context
def edit(
    ctx: click.Context,
    description: str | None,
    branch: str | None,
    clipboard: bool,
    from_stdin: bool,
    issue: str | None,
    ai_summarize: bool,
    ai_timeout: float | None,
    commit: bool,
    push: bool,
    force: bool,
) -> None:
    """Add or update a branch description.

    DESCRIPTION is used verbatim when given. Otherwise the text comes from
    --clipboard, --stdin or --issue, or is asked for interactively.

    Editing the checked-out branch writes BRANCHREADME.md in the working
    tree. Editing any other branch commits straight onto that branch
    without checking it out.
    """
    from branchdesc.cli import _repository_session
    from branchdesc.exceptions import UsageError
    from branchdesc.models.inputs import InputRequest
    from branchdesc.operations.edit import edit_description

    console = get_console()
    try:
        request = InputRequest.from_options(
            text=description,
            clipboard=clipboard,
            stdin=from_stdin,
            issue=issue,
            ai_summarize=ai_summarize,
            ai_timeout=ai_timeout,
        )
    except UsageError as e:
        format_error(str(e), console)
        raise SystemExit(1) from None

    def confirm(target: str, current: str | None) -> bool:
        if from_stdin:
            # Standard input already holds the description, not an answer.
            raise UsageError(
                f"Cannot confirm editing branch '{target}' while the description is read "
                "from --stdin; pass --force (-f) to skip the confirmation."
            )
        where = f"not current branch '{escape(current)}'" if current else "HEAD is detached"
        console.print(
            f"[yellow]You are about to modify branch '{escape(target)}' ({where})[/yellow]",
            highlight=False,
            soft_wrap=True,
        )
        return click.confirm("Continue?", default=False)

    def prompt(target: str, existing: str) -> str:
        if existing.strip():
            console.print(f"Current description for branch '{escape(target)}':", highlight=False)
            console.print(escape(existing.strip()), highlight=False, soft_wrap=True)
            console.print()
        return click.prompt(
            f"Enter description for branch '{target}'", default="", show_default=False
        )

    def notify(message: str) -> None:
        console.print(f"[dim]{escape(message)}[/dim]", highlight=False, soft_wrap=True)

    with _repository_session(ctx) as (repo, _):
        result = edit_description(
            repo,
            request,
            branch=branch,
            commit=commit,
            push=push,
            force=force,
            confirm=confirm,
            prompt=prompt,
            notify=notify,
        )
        format_edit_result(result, console)
