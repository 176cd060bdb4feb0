"""Domain models for branchdesc."""

from branchdesc.models.branch import BranchDescription, BranchRef, LocalBranch, RemoteBranch
from branchdesc.models.config import BranchDescConfig
from branchdesc.models.inputs import InputRequest, InputSource

__all__ = [
    "BranchDescription",
    "BranchRef",
    "LocalBranch",
    "RemoteBranch",
    "BranchDescConfig",
    "InputRequest",
    "InputSource",
]
