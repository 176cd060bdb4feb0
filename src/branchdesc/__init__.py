"""branchdesc: per-branch descriptions stored in the branches themselves.

Each branch carries its own BRANCHREADME.md. Descriptions travel with
pushes, survive clones, and can be listed for every local and remote
branch without checking anything out.
"""

from branchdesc._version import __version__

# Core entry point
from branchdesc.repository import BranchRepository

# Models and configuration
from branchdesc.models.branch import BranchDescription, BranchRef, LocalBranch, RemoteBranch
from branchdesc.models.config import DESCRIPTION_FILE, BranchDescConfig
from branchdesc.models.inputs import InputRequest, InputSource

# Operations
from branchdesc.operations.commit import CommitResult, commit_current_branch, commit_to_branch, push_branch
from branchdesc.operations.edit import EditResult, edit_description
from branchdesc.operations.listing import collect_descriptions
from branchdesc.operations.summarize import summarize_description

# Text utilities
from branchdesc.formatting import terminal_width, wrap_text
from branchdesc.normalize import clean_ai_preamble, format_issue_json, parse_issue_reference

# LLM protocol
from branchdesc.llm.protocols import LLMClient
from branchdesc.llm.client import OllamaClient

# Exceptions
from branchdesc.exceptions import (
    BranchDescError,
    RepositoryError,
    NotARepositoryError,
    DetachedHeadError,
    NoCommitsError,
    BranchNotFoundError,
    RemoteOnlyBranchError,
    UsageError,
    InputError,
    ClipboardError,
    StdinError,
    DescriptionFileError,
    PushError,
    IssueTrackerError,
    InvalidIssueReferenceError,
)
from branchdesc.llm.errors import (
    LLMClientError,
    LLMConnectionError,
    LLMTimeoutError,
    LLMResponseError,
    EmptySummaryError,
)

__all__ = [
    "__version__",
    "BranchRepository",
    # Models
    "BranchDescription",
    "BranchRef",
    "LocalBranch",
    "RemoteBranch",
    "DESCRIPTION_FILE",
    "BranchDescConfig",
    "InputRequest",
    "InputSource",
    # Operations
    "CommitResult",
    "commit_current_branch",
    "commit_to_branch",
    "push_branch",
    "EditResult",
    "edit_description",
    "collect_descriptions",
    "summarize_description",
    # Text utilities
    "terminal_width",
    "wrap_text",
    "clean_ai_preamble",
    "format_issue_json",
    "parse_issue_reference",
    # LLM
    "LLMClient",
    "OllamaClient",
    # Exceptions
    "BranchDescError",
    "RepositoryError",
    "NotARepositoryError",
    "DetachedHeadError",
    "NoCommitsError",
    "BranchNotFoundError",
    "RemoteOnlyBranchError",
    "UsageError",
    "InputError",
    "ClipboardError",
    "StdinError",
    "DescriptionFileError",
    "PushError",
    "IssueTrackerError",
    "InvalidIssueReferenceError",
    "LLMClientError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMResponseError",
    "EmptySummaryError",
]
