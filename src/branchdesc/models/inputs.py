"""Input source selection for the edit operation."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from branchdesc.exceptions import UsageError


class InputSource(str, enum.Enum):
    """Where the new description text comes from."""

    ARGUMENT = "argument"
    PROMPT = "prompt"
    CLIPBOARD = "clipboard"
    STDIN = "stdin"
    ISSUE = "issue"


# Sources whose text may be passed through AI summarization.
SUMMARIZABLE_SOURCES = frozenset({InputSource.CLIPBOARD, InputSource.STDIN, InputSource.ISSUE})


@dataclass(frozen=True)
class InputRequest:
    """A validated choice of exactly one input source.

    Attributes:
        source: The selected source.
        text: Literal description text (ARGUMENT only).
        issue_ref: Issue number or URL (ISSUE only).
        ai_summarize: Pass the resolved text through AI summarization.
        ai_timeout: Seconds to wait for the summarization endpoint; None
            defers to BranchDescConfig.ai_timeout.
    """

    source: InputSource
    text: str | None = None
    issue_ref: str | None = None
    ai_summarize: bool = False
    ai_timeout: float | None = None

    @classmethod
    def from_options(
        cls,
        *,
        text: str | None = None,
        clipboard: bool = False,
        stdin: bool = False,
        issue: str | None = None,
        ai_summarize: bool = False,
        ai_timeout: float | None = None,
    ) -> InputRequest:
        """Validate raw command options and pick the input source.

        Raises:
            UsageError: On conflicting sources, AI summarization without a
                summarizable source, or a non-positive timeout.
        """
        selected: list[InputSource] = []
        if clipboard:
            selected.append(InputSource.CLIPBOARD)
        if stdin:
            selected.append(InputSource.STDIN)
        if issue is not None:
            if not issue.strip():
                raise UsageError("--issue requires an issue number or URL.")
            selected.append(InputSource.ISSUE)

        if len(selected) > 1:
            names = ", ".join(f"--{s.value}" for s in selected)
            raise UsageError(f"Only one input source may be used at a time (got {names}).")

        if text is not None:
            if ai_summarize:
                raise UsageError(
                    "AI summarization cannot be used with direct text input. "
                    "Use --clipboard, --stdin or --issue instead."
                )
            if selected:
                raise UsageError(
                    f"A description argument cannot be combined with --{selected[0].value}."
                )
            source = InputSource.ARGUMENT
        elif selected:
            source = selected[0]
        else:
            source = InputSource.PROMPT

        if ai_summarize and source not in SUMMARIZABLE_SOURCES:
            raise UsageError(
                "--ai-summarize needs an input source to summarize: "
                "use --clipboard, --stdin or --issue."
            )
        if ai_timeout is not None and ai_timeout <= 0:
            raise UsageError("--ai-timeout must be a positive number of seconds.")

        return cls(
            source=source,
            text=text,
            issue_ref=issue.strip() if issue is not None else None,
            ai_summarize=ai_summarize,
            ai_timeout=ai_timeout,
        )
