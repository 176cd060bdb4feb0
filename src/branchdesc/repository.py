"""Branch repository accessor.

BranchRepository wraps a GitPython ``Repo`` and answers the questions the
edit and list operations ask: which branch is checked out, which branches
exist, and what description each branch tip (or the working copy) holds.

Two read paths exist on purpose:

- read_description(branch) reads the committed blob from a branch tip tree
  and never touches the working tree or index;
- read_current_description() reads the working-tree file of the checkout.
"""

from __future__ import annotations

import logging
from pathlib import Path

import git

from branchdesc.exceptions import (
    BranchNotFoundError,
    DescriptionFileError,
    DetachedHeadError,
    NoCommitsError,
    NotARepositoryError,
)
from branchdesc.models.branch import BranchRef, LocalBranch, RemoteBranch
from branchdesc.models.config import BranchDescConfig

logger = logging.getLogger(__name__)


class BranchRepository:
    """Description-aware view of one git repository.

    Usage::

        with BranchRepository.open(".") as repo:
            print(repo.current_branch())
            print(repo.read_description("feature/login"))
    """

    def __init__(self, repo: git.Repo, config: BranchDescConfig | None = None) -> None:
        if repo.bare or repo.working_tree_dir is None:
            raise NotARepositoryError(str(repo.git_dir), "bare repositories have no working tree")
        self._repo = repo
        self._config = config or BranchDescConfig()

    @classmethod
    def open(
        cls,
        path: str | Path = ".",
        config: BranchDescConfig | None = None,
    ) -> BranchRepository:
        """Open the repository at *path* or any of its parents.

        Raises:
            NotARepositoryError: If no repository is found.
        """
        try:
            repo = git.Repo(str(path), search_parent_directories=True)
        except git.NoSuchPathError as exc:
            raise NotARepositoryError(str(path), "path does not exist") from exc
        except git.InvalidGitRepositoryError as exc:
            raise NotARepositoryError(str(path)) from exc
        logger.debug("Opened repository %s", repo.working_tree_dir)
        return cls(repo, config)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def git_repo(self) -> git.Repo:
        """The underlying GitPython repository."""
        return self._repo

    @property
    def config(self) -> BranchDescConfig:
        return self._config

    @property
    def working_dir(self) -> Path:
        return Path(self._repo.working_tree_dir)

    @property
    def description_path(self) -> Path:
        """Absolute path of the description file in the working tree."""
        return self.working_dir / self._config.description_file

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def current_branch(self) -> str:
        """Return the checked-out branch name.

        Raises:
            DetachedHeadError: HEAD points at a commit, not a branch.
            NoCommitsError: The branch is unborn (empty repository).
        """
        head = self._repo.head
        if head.is_detached:
            raise DetachedHeadError()
        branch = head.ref.name
        if not head.is_valid():
            raise NoCommitsError(branch)
        return branch

    def list_local_branches(self) -> list[str]:
        return [head.name for head in self._repo.heads]

    def list_remote_branches(self) -> list[RemoteBranch]:
        """Return remote-tracking branches of every remote, in remote order.

        The symbolic ``<remote>/HEAD`` pointer is skipped.
        """
        branches: list[RemoteBranch] = []
        for remote in self._repo.remotes:
            for ref in git.RemoteReference.iter_items(self._repo, remote=remote.name):
                if ref.remote_head == "HEAD":
                    continue
                branches.append(RemoteBranch(remote=remote.name, name=ref.remote_head))
        return branches

    def resolve_branch(self, name: str) -> BranchRef | None:
        """Resolve a user-supplied branch name to a local or remote branch.

        Resolution order:

        1. local branch ``refs/heads/<name>``;
        2. remote-tracking branch under the default remote;
        3. ``<remote>/<branch>`` spelled out for any configured remote.

        Returns None if nothing matches.
        """
        if not name:
            return None

        local = LocalBranch(name)
        if self._ref_exists(local.ref_path):
            return local

        default = RemoteBranch(self._config.default_remote, name)
        if self._ref_exists(default.ref_path):
            return default

        for remote in self._repo.remotes:
            prefix = f"{remote.name}/"
            if name.startswith(prefix) and len(name) > len(prefix):
                candidate = RemoteBranch(remote.name, name[len(prefix):])
                if self._ref_exists(candidate.ref_path):
                    return candidate
        return None

    def branch_exists(self, name: str) -> bool:
        return self.resolve_branch(name) is not None

    def require_branch(self, name: str) -> BranchRef:
        """Resolve *name* or raise BranchNotFoundError listing known branches."""
        resolved = self.resolve_branch(name)
        if resolved is None:
            raise BranchNotFoundError(name, self.available_branches())
        logger.debug("Resolved branch %r -> %s", name, resolved.ref_path)
        return resolved

    def available_branches(self) -> list[str]:
        """Human-readable list of local and default-remote branches."""
        names = self.list_local_branches()
        names.extend(
            f"{branch.name} (remote)"
            for branch in self.list_remote_branches()
            if branch.remote == self._config.default_remote
        )
        return names

    def _ref_exists(self, path: str) -> bool:
        try:
            return git.Reference(self._repo, path).is_valid()
        except ValueError:
            return False

    # ------------------------------------------------------------------
    # Descriptions
    # ------------------------------------------------------------------

    def read_description(self, branch: str | BranchRef) -> str | None:
        """Read the description committed at a branch tip.

        Works for local and remote-tracking branches alike and does not
        alter the working tree. Returns None when the branch does not
        resolve or its tree has no description file.
        """
        ref = self.resolve_branch(branch) if isinstance(branch, str) else branch
        if ref is None:
            return None

        tree = self._repo.commit(ref.ref_path).tree
        try:
            blob = tree / self._config.description_file
        except KeyError:
            return None
        if blob.type != "blob":
            return None
        return blob.data_stream.read().decode("utf-8", errors="replace")

    def read_current_description(self) -> str:
        """Read the working-tree description file, or "" if absent."""
        try:
            with open(self.description_path, encoding="utf-8", newline="") as fh:
                return fh.read()
        except FileNotFoundError:
            return ""

    def write_current_description(self, text: str) -> None:
        """Overwrite the working-tree description file (no commit)."""
        try:
            with open(self.description_path, "w", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except OSError as exc:
            raise DescriptionFileError(self._config.description_file, str(exc)) from exc
        logger.debug("Wrote %d chars to %s", len(text), self.description_path)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release GitPython's cached processes and file handles."""
        self._repo.close()

    def __enter__(self) -> BranchRepository:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
