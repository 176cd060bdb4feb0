"""Branch description exception hierarchy.

All branchdesc-specific exceptions inherit from BranchDescError.
"""

from __future__ import annotations


class BranchDescError(Exception):
    """Base exception for all branchdesc errors."""


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

class RepositoryError(BranchDescError):
    """Base for errors opening or inspecting the repository."""


class NotARepositoryError(RepositoryError):
    """Raised when the given path is not inside a usable git repository."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Failed to open repository at '{path}'. Make sure you're in a Git repository."
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class DetachedHeadError(RepositoryError):
    """Raised when HEAD does not point at a branch."""

    def __init__(self) -> None:
        super().__init__(
            "HEAD is detached. Check out a branch or pass --branch explicitly."
        )


class NoCommitsError(RepositoryError):
    """Raised when the current branch has no commits yet."""

    def __init__(self, branch_name: str) -> None:
        self.branch_name = branch_name
        super().__init__(
            f"Branch '{branch_name}' has no commits yet. Create an initial commit first."
        )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class BranchNotFoundError(BranchDescError):
    """Raised when a branch exists neither locally nor on the default remote."""

    def __init__(self, branch_name: str, available: list[str] | None = None) -> None:
        self.branch_name = branch_name
        self.available = list(available or [])
        msg = f"Branch '{branch_name}' not found."
        if self.available:
            listing = "\n".join(f"  {name}" for name in self.available)
            msg += f" Available branches:\n{listing}"
        super().__init__(msg)


class RemoteOnlyBranchError(BranchDescError):
    """Raised when writing to a branch that only exists as a remote-tracking ref."""

    def __init__(self, branch_name: str, remote: str) -> None:
        self.branch_name = branch_name
        self.remote = remote
        super().__init__(
            f"Branch '{branch_name}' only exists on remote '{remote}'. "
            f"Check it out locally (git switch {branch_name}) before editing its description."
        )


# ---------------------------------------------------------------------------
# Usage
# ---------------------------------------------------------------------------

class UsageError(BranchDescError):
    """Raised when command options are combined in an unsupported way."""


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

class InputError(BranchDescError):
    """Base for failures obtaining description text."""


class ClipboardError(InputError):
    """Raised when the system clipboard cannot be read."""


class StdinError(InputError):
    """Raised when standard input has no piped data."""


class DescriptionFileError(InputError):
    """Raised when the working-tree description file cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


# ---------------------------------------------------------------------------
# Network / external commands
# ---------------------------------------------------------------------------

class PushError(BranchDescError):
    """Raised when ``git push`` fails."""

    def __init__(self, branch_name: str, detail: str) -> None:
        self.branch_name = branch_name
        self.detail = detail
        super().__init__(f"Failed to push branch '{branch_name}': {detail}")


class IssueTrackerError(BranchDescError):
    """Raised when an issue cannot be fetched or decoded."""


class InvalidIssueReferenceError(IssueTrackerError):
    """Raised when an issue reference is neither a number nor a GitLab issue URL."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(
            f"Invalid issue reference: '{reference}'. "
            f"Expected issue number or GitLab issue URL."
        )
