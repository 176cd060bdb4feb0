"""Plain-text helpers for display formatting.

The rich rendering of listings lives in branchdesc.cli.formatting; the
helpers here only shape strings and are safe to use without a terminal.
"""
from __future__ import annotations

from rich.console import Console

DEFAULT_WIDTH = 80
MIN_WIDTH = 10


def terminal_width() -> int:
    """Return 90% of the terminal width, or 90% of 80 columns when not a TTY.

    Rich honours ``COLUMNS`` and falls back to 80 columns when output is
    piped, so the result is always usable.
    """
    width = Console().width or DEFAULT_WIDTH
    return max(MIN_WIDTH, width * 90 // 100)


def wrap_text(text: str, width: int) -> str:
    """Greedily wrap *text* to lines of at most *width* characters.

    Words are split on any whitespace (existing newlines included) and
    rejoined with single spaces. A word longer than *width* is never split;
    it is emitted on a line of its own.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = word
        elif current:
            current = f"{current} {word}"
        else:
            current = word
    if current:
        lines.append(current)
    return "\n".join(lines)


def first_line(text: str) -> str:
    """Return the first line of *text* (empty string for empty text)."""
    return text.splitlines()[0] if text else ""
