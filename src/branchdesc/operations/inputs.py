"""Input resolvers: obtain description text from outside the repository.

Each resolver returns trimmed text or raises an InputError /
IssueTrackerError subclass describing what went wrong.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import TextIO

from branchdesc.exceptions import ClipboardError, IssueTrackerError, StdinError
from branchdesc.normalize import format_issue_json, parse_issue_reference

logger = logging.getLogger(__name__)


def _clipboard_commands(platform: str) -> list[list[str]]:
    """Candidate paste commands for *platform*, most preferred first."""
    if platform == "darwin":
        return [["pbpaste"]]
    if platform.startswith("win"):
        return [["powershell", "-NoProfile", "-Command", "Get-Clipboard"]]
    # Wayland first, then X11.
    return [
        ["wl-paste", "--no-newline"],
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ]


def read_clipboard(platform: str | None = None) -> str:
    """Return the trimmed text content of the system clipboard.

    Raises:
        ClipboardError: No paste tool is installed or the tool failed.
    """
    platform = platform or sys.platform
    commands = [cmd for cmd in _clipboard_commands(platform) if shutil.which(cmd[0])]
    if not commands:
        raise ClipboardError(
            "Failed to access clipboard: no clipboard tool found "
            "(install wl-clipboard, xclip or xsel)."
        )

    command = commands[0]
    logger.debug("Reading clipboard with %s", command[0])
    try:
        proc = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise ClipboardError(f"Failed to read from clipboard: {exc}") from exc
    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"{command[0]} exited with {proc.returncode}"
        raise ClipboardError(f"Failed to read from clipboard: {detail}")
    return proc.stdout.strip()


def read_stdin(stream: TextIO | None = None) -> str:
    """Read all of standard input, trimmed.

    Raises:
        StdinError: When stdin is an interactive terminal with nothing piped.
    """
    stream = stream if stream is not None else sys.stdin
    if stream.isatty():
        raise StdinError(
            "No input detected on stdin. Pipe text in, use --clipboard, "
            "or provide the description as an argument instead."
        )
    return stream.read().strip()


def fetch_issue(reference: str, *, timeout: float | None = 60.0) -> str:
    """Fetch a GitLab issue with ``glab`` and render it as description text.

    Args:
        reference: Issue number or GitLab issue URL.
        timeout: Seconds to wait for ``glab``; None waits forever.

    Raises:
        InvalidIssueReferenceError: Unparseable reference.
        IssueTrackerError: glab missing, failing, timing out, or returning
            unusable JSON.
    """
    number = parse_issue_reference(reference)
    command = ["glab", "issue", "view", number, "--output", "json"]
    logger.debug("Running %s", " ".join(command))
    try:
        proc = subprocess.run(
            command, capture_output=True, text=True, check=False, timeout=timeout
        )
    except FileNotFoundError as exc:
        raise IssueTrackerError(
            "Failed to execute glab command. Make sure glab is installed and configured."
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise IssueTrackerError(f"glab timed out after {timeout:g}s fetching issue {number}") from exc

    if proc.returncode != 0:
        detail = proc.stderr.strip() or f"exit status {proc.returncode}"
        raise IssueTrackerError(f"glab command failed: {detail}")
    return format_issue_json(proc.stdout)
