"""Content normalizers.

Turns raw text from external collaborators into description text:

- clean_ai_preamble() strips lead-in phrases, ``<think>`` blocks and
  wrapping quotes from generated summaries.
- parse_issue_reference() accepts an issue number or a GitLab issue URL.
- format_issue_json() renders ``glab issue view --output json`` output.
"""

from __future__ import annotations

import json
import re

from branchdesc.exceptions import InvalidIssueReferenceError, IssueTrackerError

# Lead-in phrases small models like to prepend. Checked in order; each match
# is stripped, so stacked preambles ("Description: Summary: ...") all go.
PREAMBLES: tuple[str, ...] = (
    "Here's a concise branch description:",
    "Here is a concise branch description:",
    "Here's a branch description:",
    "Here is a branch description:",
    "Here's the branch description:",
    "Here is the branch description:",
    "A concise branch description:",
    "Branch description:",
    "Description:",
    "Summary:",
    "Here's a summary:",
    "Here is a summary:",
    "Based on the content:",
    "Based on this content:",
    "Description for this branch:",
    "A brief description:",
    "Brief description:",
)

_THINK_BLOCK = re.compile(r"([ \t]*)<think>.*?</think>([ \t]*)", re.DOTALL)
_THINK_MARKERS = ("<think>", "</think>")
_ISSUE_URL = re.compile(r"^https?://[^/]+/.+/-/issues/(\d+)/?(?:[?#].*)?$")


def _drop_think_block(match: re.Match[str]) -> str:
    # Inside a line, the words on either side keep one space between them.
    text = match.string
    before = text[match.start() - 1] if match.start() > 0 else "\n"
    after = text[match.end()] if match.end() < len(text) else "\n"
    if "\n" in (before, after) or not (match.group(1) or match.group(2)):
        return ""
    return " "


def clean_ai_preamble(text: str) -> str:
    """Strip boilerplate from generated text.

    1. Complete ``<think>...</think>`` blocks are removed.
    2. Lines still holding a stray marker, and blank lines, are dropped.
    3. Known preambles are stripped from the start (case-insensitive).
    4. One pair of wrapping double or single quotes is removed.
    """
    text = _THINK_BLOCK.sub(_drop_think_block, text)
    lines = [
        line.rstrip()
        for line in text.splitlines()
        if line.strip() and not any(marker in line for marker in _THINK_MARKERS)
    ]
    result = "\n".join(lines)

    for preamble in PREAMBLES:
        stripped = result.lstrip()
        if stripped.lower().startswith(preamble.lower()):
            result = stripped[len(preamble):].lstrip()

    result = result.strip()
    if len(result) >= 2 and result[0] == result[-1] and result[0] in "\"'":
        result = result[1:-1].strip()
    return result


def parse_issue_reference(reference: str) -> str:
    """Return the issue number from a bare number or a GitLab issue URL.

    Raises:
        InvalidIssueReferenceError: For anything else (GitHub URLs, merge
            request URLs, mixed alphanumerics, empty strings).
    """
    match = _ISSUE_URL.match(reference)
    if match:
        return match.group(1)
    if reference and reference.isascii() and reference.isdigit():
        return reference
    raise InvalidIssueReferenceError(reference)


def format_issue_json(raw: str) -> str:
    """Render issue JSON as ``title`` or ``title\\n\\ndescription``.

    Raises:
        IssueTrackerError: If the payload is not JSON or has no string title.
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise IssueTrackerError(f"Failed to parse JSON output from glab: {exc}") from exc

    title = payload.get("title") if isinstance(payload, dict) else None
    if not isinstance(title, str):
        raise IssueTrackerError("Could not extract issue title from glab output")

    description = payload.get("description")
    description = description.strip() if isinstance(description, str) else ""
    if not description:
        return title
    return f"{title}\n\n{description}"
