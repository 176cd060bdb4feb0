"""The edit operation: resolve a target branch, obtain text, persist it.

Flow::

    resolve target -> (not current) confirm unless forced
    -> read existing description -> resolve new text from the input source
    -> (current) write file [+ commit/push]
    -> (other branch) commit straight onto its ref [+ push]

Interaction with the user goes through callables so the flow is usable
outside the CLI: *confirm* answers "modify a non-current branch?",
*prompt* asks for text interactively, *notify* receives progress lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, TextIO

from branchdesc.exceptions import DetachedHeadError, NoCommitsError, RemoteOnlyBranchError
from branchdesc.llm.client import OllamaClient
from branchdesc.models.branch import RemoteBranch
from branchdesc.models.config import DEFAULT_AI_TIMEOUT
from branchdesc.models.inputs import InputRequest, InputSource
from branchdesc.operations.commit import CommitResult, commit_current_branch, commit_to_branch
from branchdesc.operations.inputs import fetch_issue, read_clipboard, read_stdin
from branchdesc.operations.summarize import summarize_description

if TYPE_CHECKING:
    from branchdesc.models.config import BranchDescConfig
    from branchdesc.repository import BranchRepository

logger = logging.getLogger(__name__)

ConfirmCallable = Callable[[str, Optional[str]], bool]
PromptCallable = Callable[[str, str], str]
SummarizeCallable = Callable[[str, float], str]
NotifyCallable = Callable[[str], None]


@dataclass(frozen=True)
class EditResult:
    """Outcome of edit_description().

    Attributes:
        branch: Target branch name.
        current_branch: Checked-out branch, or None when HEAD is detached.
        is_current: Whether the target is the checked-out branch.
        is_modify: Whether a non-blank description existed before.
        cancelled: The user declined, or supplied empty text.
        reason: Why the edit was cancelled ("declined" or "empty").
        commit: The commit created, if any.
    """

    branch: str
    current_branch: str | None
    is_current: bool
    is_modify: bool = False
    cancelled: bool = False
    reason: str | None = None
    commit: CommitResult | None = None

    @property
    def action(self) -> str:
        return "Updated" if self.is_modify else "Added"

    @property
    def committed(self) -> bool:
        return self.commit is not None

    @property
    def pushed(self) -> bool:
        return self.commit is not None and self.commit.pushed

    @property
    def commit_sha(self) -> str | None:
        return self.commit.commit_sha if self.commit is not None else None


def ollama_summarizer(
    config: BranchDescConfig,
    notify: NotifyCallable | None = None,
) -> SummarizeCallable:
    """Build a summarizer that talks to the configured Ollama server."""

    def summarize(content: str, timeout: float) -> str:
        with OllamaClient(
            base_url=config.ollama_url, default_model=config.model, timeout=timeout
        ) as client:
            return summarize_description(
                content,
                client,
                timeout=timeout,
                max_chars=config.max_ai_content,
                notify=notify,
            )

    return summarize


def resolve_content(
    request: InputRequest,
    *,
    branch: str,
    existing: str,
    prompt: PromptCallable,
    summarizer: SummarizeCallable | None = None,
    issue_timeout: float | None = 60.0,
    ai_timeout: float = DEFAULT_AI_TIMEOUT,
    stdin: TextIO | None = None,
) -> str:
    """Produce description text from the request's input source.

    Returns "" when the source yields nothing; summarization is skipped for
    empty text. The request's own timeout wins over *ai_timeout*.
    """
    source = request.source
    if source is InputSource.ARGUMENT:
        content = request.text or ""
    elif source is InputSource.PROMPT:
        content = prompt(branch, existing).strip()
    elif source is InputSource.CLIPBOARD:
        content = read_clipboard()
    elif source is InputSource.STDIN:
        content = read_stdin(stdin)
    elif source is InputSource.ISSUE:
        content = fetch_issue(request.issue_ref or "", timeout=issue_timeout)
    else:
        raise ValueError(f"Unknown input source: {source!r}")

    if request.ai_summarize and content.strip():
        if summarizer is None:
            raise ValueError("ai_summarize requested but no summarizer was provided")
        timeout = request.ai_timeout if request.ai_timeout is not None else ai_timeout
        content = summarizer(content, timeout)
    return content


def edit_description(
    repo: BranchRepository,
    request: InputRequest,
    *,
    branch: str | None = None,
    commit: bool = False,
    push: bool = False,
    force: bool = False,
    confirm: ConfirmCallable,
    prompt: PromptCallable,
    summarizer: SummarizeCallable | None = None,
    notify: NotifyCallable | None = None,
    stdin: TextIO | None = None,
) -> EditResult:
    """Edit the description of *branch* (the current branch by default).

    Args:
        repo: Repository to modify.
        request: Validated input source selection.
        branch: Target branch; None means the checked-out branch.
        commit: Commit the working-tree file (current branch only; other
            branches are always committed).
        push: Push after committing. Implies *commit*.
        force: Skip the confirmation for non-current branches.
        confirm: ``confirm(target, current) -> bool``.
        prompt: ``prompt(target, existing) -> text`` for interactive input.
        summarizer: ``summarizer(text, timeout) -> text``; defaults to the
            configured Ollama server when AI summarization is requested.
        notify: Receives progress lines.
        stdin: Stream for the STDIN source (defaults to sys.stdin).

    Raises:
        BranchNotFoundError, RemoteOnlyBranchError, DetachedHeadError,
        NoCommitsError, InputError, IssueTrackerError, LLMClientError,
        PushError.
    """
    try:
        current: str | None = repo.current_branch()
    except (DetachedHeadError, NoCommitsError):
        if branch is None:
            raise
        current = None

    target = branch if branch is not None else current
    ref = repo.require_branch(target)
    if isinstance(ref, RemoteBranch):
        raise RemoteOnlyBranchError(ref.name, ref.remote)
    target = ref.name
    is_current = target == current

    if is_current:
        existing = repo.read_current_description()
    else:
        existing = repo.read_description(ref) or ""
    is_modify = bool(existing.strip())
    logger.debug("Editing %s (current=%s, modify=%s)", target, is_current, is_modify)

    base = dict(branch=target, current_branch=current, is_current=is_current, is_modify=is_modify)

    if not is_current and not force and not confirm(target, current):
        return EditResult(**base, cancelled=True, reason="declined")

    if request.ai_summarize and summarizer is None:
        summarizer = ollama_summarizer(repo.config, notify)
    content = resolve_content(
        request,
        branch=target,
        existing=existing,
        prompt=prompt,
        summarizer=summarizer,
        issue_timeout=repo.config.issue_timeout,
        ai_timeout=repo.config.ai_timeout,
        stdin=stdin,
    )
    if not content.strip():
        return EditResult(**base, cancelled=True, reason="empty")

    result: CommitResult | None = None
    if is_current:
        repo.write_current_description(content)
        if commit or push:
            result = commit_current_branch(repo, is_modify=is_modify, push=push)
    else:
        result = commit_to_branch(repo, target, content, is_modify=is_modify, push=push)

    return EditResult(**base, commit=result)
