"""Description listing across local and remote-tracking branches."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from branchdesc.models.branch import BranchDescription, BranchRef, LocalBranch

if TYPE_CHECKING:
    from branchdesc.repository import BranchRepository

logger = logging.getLogger(__name__)


def collect_descriptions(
    repo: BranchRepository,
    *,
    include_all: bool = False,
    placeholder: str | None = None,
) -> list[BranchDescription]:
    """Collect branch descriptions, local branches first.

    A remote-tracking branch is skipped when a local branch with the same
    short name exists. Branches without a (non-blank) description are only
    included when *include_all* is set, with *placeholder* as their text.

    Args:
        repo: The repository to read.
        include_all: Include branches that have no description.
        placeholder: Text for such branches. Defaults to the config value.

    Returns:
        One BranchDescription per listed branch, trimmed.
    """
    if placeholder is None:
        placeholder = repo.config.placeholder

    local_names = repo.list_local_branches()
    refs: list[BranchRef] = [LocalBranch(name) for name in local_names]
    seen = set(local_names)
    for remote_branch in repo.list_remote_branches():
        if remote_branch.short_name in seen:
            logger.debug("Skipping %s: shadowed by local branch", remote_branch.display_name)
            continue
        refs.append(remote_branch)

    descriptions: list[BranchDescription] = []
    for ref in refs:
        text = (repo.read_description(ref) or "").strip()
        if text:
            descriptions.append(BranchDescription(branch=ref.display_name, description=text))
        elif include_all:
            descriptions.append(BranchDescription(branch=ref.display_name, description=placeholder))
    return descriptions
