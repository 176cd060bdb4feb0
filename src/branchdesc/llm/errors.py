"""LLM-specific error hierarchy.

All LLM errors inherit from BranchDescError for consistent exception handling.
"""

from __future__ import annotations

from branchdesc.exceptions import BranchDescError


class LLMClientError(BranchDescError):
    """Base for all LLM client errors."""


class LLMConnectionError(LLMClientError):
    """The text-generation endpoint could not be reached."""


class LLMTimeoutError(LLMClientError):
    """The endpoint did not answer within the requested timeout.

    Attributes:
        timeout: The timeout that expired, in seconds.
    """

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(
            f"AI summarization timed out after {timeout:g}s. "
            f"Retry with a larger --ai-timeout."
        )


class LLMResponseError(LLMClientError):
    """Non-success status or unexpected response format."""


class EmptySummaryError(LLMClientError):
    """Generated text was empty after cleaning."""

    def __init__(self) -> None:
        super().__init__(
            "AI generated empty summary. Please try again or provide description manually."
        )
