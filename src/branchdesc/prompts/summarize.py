"""Summarization prompts for branch descriptions.

Two system-prompt variants cover the inputs people actually paste:

- **DIFF_SUMMARIZE_SYSTEM** -- for git diffs / patches.
- **DEFAULT_SUMMARIZE_SYSTEM** -- for issue text, notes, anything else.
"""

from __future__ import annotations

DIFF_SUMMARIZE_SYSTEM: str = (
    "You are an expert software engineer. Create a concise 2-3 sentence "
    "branch description from this git diff. Focus on the main changes and "
    "their purpose. Do not include implementation details or file names."
)

DEFAULT_SUMMARIZE_SYSTEM: str = (
    "You are an expert software engineer. Create a concise 2-3 sentence "
    "branch description from this content. Focus on the main goals and "
    "requirements. Keep it professional and actionable."
)


def looks_like_diff(content: str) -> bool:
    """Heuristic: does *content* look like ``git diff`` output?"""
    if "diff --git" in content or "@@" in content:
        return True
    return any(line.startswith(("+++", "---")) for line in content.splitlines())


def build_summarize_messages(content: str) -> list[dict[str, str]]:
    """Build the system/user message pair for a summarization request."""
    system = DIFF_SUMMARIZE_SYSTEM if looks_like_diff(content) else DEFAULT_SUMMARIZE_SYSTEM
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": f"Content to summarize:\n\n{content}"},
    ]
