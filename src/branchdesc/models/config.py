"""Configuration model for branchdesc.

BranchDescConfig holds every tunable the tool uses: the description file
name, the default remote, and the local Ollama endpoint used for
summarization. Values come from constructor arguments or, via from_env(),
from environment variables.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

DESCRIPTION_FILE = "BRANCHREADME.md"
DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_MODEL = "llama3.2:1b"
DEFAULT_AI_TIMEOUT = 120.0


class BranchDescConfig(BaseModel):
    """Per-invocation configuration."""

    description_file: str = DESCRIPTION_FILE
    default_remote: str = "origin"
    ollama_url: str = DEFAULT_OLLAMA_URL
    model: str = DEFAULT_MODEL
    ai_timeout: float = Field(default=DEFAULT_AI_TIMEOUT, gt=0)
    max_ai_content: int = Field(default=8000, gt=0)
    issue_timeout: Optional[float] = 60.0  # None = wait forever on glab
    placeholder: str = "(no description)"

    @classmethod
    def from_env(cls, **overrides: object) -> BranchDescConfig:
        """Build a config from environment variables, then apply overrides.

        Reads ``GIT_BRANCH_DESC_REMOTE``, ``GIT_BRANCH_DESC_OLLAMA_URL``
        (falling back to ``OLLAMA_HOST``), ``GIT_BRANCH_DESC_MODEL`` and
        ``GIT_BRANCH_DESC_AI_TIMEOUT``.
        """
        values: dict[str, object] = {}
        remote = os.environ.get("GIT_BRANCH_DESC_REMOTE")
        if remote:
            values["default_remote"] = remote
        url = os.environ.get("GIT_BRANCH_DESC_OLLAMA_URL") or os.environ.get("OLLAMA_HOST")
        if url:
            if "://" not in url:
                url = f"http://{url}"
            values["ollama_url"] = url
        model = os.environ.get("GIT_BRANCH_DESC_MODEL")
        if model:
            values["model"] = model
        ai_timeout = os.environ.get("GIT_BRANCH_DESC_AI_TIMEOUT")
        if ai_timeout:
            values["ai_timeout"] = ai_timeout
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
