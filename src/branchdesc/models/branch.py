"""Branch domain models.

BranchDescription is the display model returned when listing descriptions.
LocalBranch and RemoteBranch are the two shapes a branch name can resolve to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel


class BranchDescription(BaseModel):
    """A branch paired with its description text, built for display only."""

    branch: str
    description: str


@dataclass(frozen=True)
class LocalBranch:
    """A branch under ``refs/heads``."""

    name: str

    @property
    def ref_path(self) -> str:
        return f"refs/heads/{self.name}"

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def short_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class RemoteBranch:
    """A remote-tracking branch under ``refs/remotes/<remote>``.

    ``name`` is the branch name on the remote (``feature/x``), without the
    remote prefix.
    """

    remote: str
    name: str

    @property
    def ref_path(self) -> str:
        return f"refs/remotes/{self.remote}/{self.name}"

    @property
    def display_name(self) -> str:
        return f"{self.remote}/{self.name}"

    @property
    def short_name(self) -> str:
        return self.name


BranchRef = Union[LocalBranch, RemoteBranch]
