"""AI summarization pass for description text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from branchdesc.llm.errors import EmptySummaryError
from branchdesc.normalize import clean_ai_preamble
from branchdesc.prompts.summarize import build_summarize_messages

if TYPE_CHECKING:
    from branchdesc.llm.protocols import LLMClient

logger = logging.getLogger(__name__)

MAX_CONTENT_LENGTH = 8000


def summarize_description(
    content: str,
    client: LLMClient,
    *,
    timeout: float,
    model: str | None = None,
    max_chars: int = MAX_CONTENT_LENGTH,
    notify: Callable[[str], None] | None = None,
) -> str:
    """Condense *content* into a short branch description.

    Content longer than *max_chars* is truncated before sending. The reply
    is cleaned with clean_ai_preamble().

    Args:
        content: Raw text (issue body, diff, notes).
        client: Any LLMClient.
        timeout: Seconds to wait for the reply.
        model: Model override; the client default otherwise.
        max_chars: Truncation limit in characters.
        notify: Receives progress lines for the user.

    Raises:
        LLMClientError: From the client (connection, timeout, status).
        EmptySummaryError: If nothing is left after cleaning.
    """
    if len(content) > max_chars:
        if notify:
            notify(
                f"Content is large ({len(content)} chars), truncating to "
                f"{max_chars} chars for AI processing..."
            )
        content = content[:max_chars]

    if notify:
        notify(f"Generating AI summary (timeout: {timeout:g}s)...")
    messages = build_summarize_messages(content)
    response = client.chat(messages, model=model, timeout=timeout)
    raw = client.extract_content(response)
    logger.debug("Raw summary: %r", raw)

    summary = clean_ai_preamble(raw)
    if not summary.strip():
        raise EmptySummaryError()
    return summary
