"""Shared test fixtures for branchdesc.

Provides real temporary git repositories built with GitPython: a working
repository on ``main`` with one commit, optionally wired to a bare
``origin`` repository.
"""

from __future__ import annotations

from pathlib import Path

import git
import pytest

from branchdesc.models.config import DESCRIPTION_FILE
from branchdesc.repository import BranchRepository


def init_repo(path: Path) -> git.Repo:
    """Create an empty repository with HEAD on ``main`` and a test identity."""
    repo = git.Repo.init(path)
    repo.git.symbolic_ref("HEAD", "refs/heads/main")
    with repo.config_writer() as cw:
        cw.set_value("user", "name", "Test User")
        cw.set_value("user", "email", "test@example.com")
        cw.set_value("commit", "gpgsign", "false")
    return repo


def commit_file(repo: git.Repo, name: str, content: str, message: str) -> git.Commit:
    """Write *name* in the working tree and commit it on the checked-out branch."""
    path = Path(repo.working_tree_dir) / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    repo.index.add([name])
    return repo.index.commit(message)


def commit_description_on(repo: git.Repo, branch: str, text: str) -> None:
    """Commit a description on *branch* via a real checkout, then return to main."""
    previous = repo.active_branch.name
    repo.git.checkout("-q", branch)
    try:
        commit_file(repo, DESCRIPTION_FILE, text, "Add branch description [skip ci]")
    finally:
        repo.git.checkout("-q", previous)


@pytest.fixture
def work_repo(tmp_path: Path) -> git.Repo:
    """Working repository on ``main`` with a single README commit."""
    repo = init_repo(tmp_path / "work")
    commit_file(repo, "README.md", "# Project\n", "Initial commit")
    yield repo
    repo.close()


@pytest.fixture
def origin(tmp_path: Path, work_repo: git.Repo) -> git.Repo:
    """Bare repository registered as ``origin`` of work_repo, with main pushed."""
    bare = git.Repo.init(tmp_path / "origin.git", bare=True)
    work_repo.create_remote("origin", str(tmp_path / "origin.git"))
    work_repo.git.push("origin", "main")
    yield bare
    bare.close()


@pytest.fixture
def remote_only_branch(work_repo: git.Repo, origin: git.Repo) -> str:
    """A branch present only as ``origin/remote-feature`` with a description."""
    work_repo.create_head("remote-feature")
    commit_description_on(work_repo, "remote-feature", "Work that lives on the server")
    work_repo.git.push("origin", "remote-feature")
    work_repo.delete_head("remote-feature", force=True)
    work_repo.remotes.origin.fetch()
    return "remote-feature"


@pytest.fixture
def repo(work_repo: git.Repo) -> BranchRepository:
    """BranchRepository over work_repo."""
    accessor = BranchRepository(work_repo)
    yield accessor
    accessor.close()
