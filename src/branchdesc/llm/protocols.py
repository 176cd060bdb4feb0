"""LLM client protocol.

Defines the pluggable interface the summarization pass talks to.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LLMClient(Protocol):
    """Protocol for pluggable LLM clients.

    Any object with chat(), extract_content() and close() matching these
    signatures works. The built-in OllamaClient implements this protocol.
    """

    def chat(
        self,
        messages: list[dict[str, str]],
        *,
        model: str | None = None,
        timeout: float | None = None,
    ) -> dict:
        """Send messages, return the response dict."""
        ...

    def extract_content(self, response: dict) -> str:
        """Extract the assistant message text from a response dict."""
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...
