"""Commit writer: persist a description as a commit, then optionally push.

Two paths with different side effects:

- commit_current_branch() stages the working-tree file into the real index
  and commits on top of HEAD, advancing the checked-out branch.
- commit_to_branch() builds a tree from another branch's tip plus the new
  blob in a throwaway in-memory index, commits it with the old tip as
  parent and moves ``refs/heads/<branch>``. The working tree, the real
  index and HEAD are left alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import TYPE_CHECKING

import git
from git.index.typ import BaseIndexEntry
from gitdb.base import IStream

from branchdesc.exceptions import PushError, RemoteOnlyBranchError
from branchdesc.models.branch import RemoteBranch

if TYPE_CHECKING:
    from branchdesc.repository import BranchRepository

logger = logging.getLogger(__name__)

ADD_MESSAGE = "Add branch description [skip ci]"
UPDATE_MESSAGE = "Update branch description [skip ci]"

# Regular, non-executable file.
_BLOB_MODE = 0o100644


@dataclass(frozen=True)
class CommitResult:
    """Outcome of a description commit.

    Attributes:
        branch: Branch the commit landed on.
        commit_sha: Hex SHA of the new commit.
        message: Commit message used.
        pushed: Whether the branch was pushed afterwards.
    """

    branch: str
    commit_sha: str
    message: str
    pushed: bool = False


def commit_message(is_modify: bool) -> str:
    """Pick the commit message for a new or modified description."""
    return UPDATE_MESSAGE if is_modify else ADD_MESSAGE


def commit_current_branch(
    repo: BranchRepository,
    *,
    is_modify: bool,
    push: bool = False,
) -> CommitResult:
    """Stage and commit the working-tree description file on the current branch.

    Raises:
        DetachedHeadError / NoCommitsError: No committable branch checked out.
        PushError: If push was requested and failed.
    """
    branch = repo.current_branch()
    message = commit_message(is_modify)

    index = repo.git_repo.index
    index.add([repo.config.description_file])
    commit = index.commit(message)
    logger.debug("Committed %s on %s: %s", commit.hexsha[:8], branch, message)

    pushed = False
    if push:
        push_branch(repo, branch, current=True)
        pushed = True
    return CommitResult(branch=branch, commit_sha=commit.hexsha, message=message, pushed=pushed)


def commit_to_branch(
    repo: BranchRepository,
    branch: str,
    text: str,
    *,
    is_modify: bool,
    push: bool = False,
) -> CommitResult:
    """Commit *text* as the description of *branch* without checking it out.

    Raises:
        BranchNotFoundError: The branch does not exist.
        RemoteOnlyBranchError: The branch exists only as a remote-tracking ref.
        PushError: If push was requested and failed.
    """
    ref = repo.require_branch(branch)
    if isinstance(ref, RemoteBranch):
        raise RemoteOnlyBranchError(ref.name, ref.remote)

    grepo = repo.git_repo
    message = commit_message(is_modify)
    tip = grepo.commit(ref.ref_path)

    data = text.encode("utf-8")
    istream = grepo.odb.store(IStream(git.Blob.type, len(data), BytesIO(data)))

    # from_tree() reads into a temporary index file and detaches it, so the
    # repository's own index is never written.
    index = git.IndexFile.from_tree(grepo, tip)
    index.add(
        [BaseIndexEntry((_BLOB_MODE, istream.binsha, 0, repo.config.description_file))],
        write=False,
    )
    tree = index.write_tree()

    commit = git.Commit.create_from_tree(
        grepo, tree, message, parent_commits=[tip], head=False
    )
    git.Head(grepo, ref.ref_path).set_commit(commit, logmsg=message)
    logger.debug(
        "Committed %s on %s (parent %s): %s",
        commit.hexsha[:8], ref.name, tip.hexsha[:8], message,
    )

    pushed = False
    if push:
        push_branch(repo, ref.name, current=False)
        pushed = True
    return CommitResult(branch=ref.name, commit_sha=commit.hexsha, message=message, pushed=pushed)


def push_branch(repo: BranchRepository, branch: str, *, current: bool) -> None:
    """Push *branch* to the default remote with the system ``git push``.

    The current branch is pushed by name; any other branch is pushed with an
    explicit ``refs/heads/<b>:refs/heads/<b>`` refspec so the checkout's
    upstream configuration does not matter.

    Raises:
        PushError: With git's stderr when the push fails.
    """
    remote = repo.config.default_remote
    refspec = branch if current else f"refs/heads/{branch}:refs/heads/{branch}"
    logger.debug("git push %s %s", remote, refspec)
    try:
        repo.git_repo.git.push(remote, refspec)
    except git.GitCommandError as exc:
        detail = (exc.stderr or "").strip() or str(exc)
        raise PushError(branch, detail) from exc
