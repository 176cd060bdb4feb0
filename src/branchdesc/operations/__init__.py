"""Operations composing the repository accessor into user-level actions."""

from branchdesc.operations.commit import (
    ADD_MESSAGE,
    UPDATE_MESSAGE,
    CommitResult,
    commit_current_branch,
    commit_message,
    commit_to_branch,
    push_branch,
)
from branchdesc.operations.edit import EditResult, edit_description, resolve_content
from branchdesc.operations.listing import collect_descriptions
from branchdesc.operations.summarize import summarize_description

__all__ = [
    "ADD_MESSAGE",
    "UPDATE_MESSAGE",
    "CommitResult",
    "commit_current_branch",
    "commit_message",
    "commit_to_branch",
    "push_branch",
    "EditResult",
    "edit_description",
    "resolve_content",
    "collect_descriptions",
    "summarize_description",
]
