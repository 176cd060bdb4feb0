"""Built-in httpx client for a local Ollama server.

Provides a sync HTTP client for Ollama's ``/api/chat`` endpoint. Requests
are sent once; connection failures, timeouts and non-success statuses
surface immediately as LLMClientError subclasses.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from branchdesc.llm.errors import (
    LLMConnectionError,
    LLMResponseError,
    LLMTimeoutError,
)
from branchdesc.models.config import DEFAULT_MODEL, DEFAULT_OLLAMA_URL

logger = logging.getLogger(__name__)


class OllamaClient:
    """Sync httpx client for Ollama chat completions.

    Implements the LLMClient protocol.

    Usage::

        with OllamaClient() as client:
            response = client.chat([{"role": "user", "content": "Hello"}], timeout=30)
            text = client.extract_content(response)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_OLLAMA_URL,
        default_model: str = DEFAULT_MODEL,
        timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Server root, e.g. ``http://localhost:11434``.
            default_model: Model used when chat() is not given one.
            timeout: Default request timeout in seconds.
            transport: Optional httpx transport (tests use MockTransport).
        """
        self._base_url = base_url.rstrip("/")
        self._default_model = default_model
        self._timeout = timeout
        self._client = httpx.Client(
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def chat(
        self,
        messages: list[dict[str, str]],
        *,
        model: str | None = None,
        timeout: float | None = None,
    ) -> dict:
        """Send a non-streaming chat request.

        Args:
            messages: List of message dicts with 'role' and 'content'.
            model: Model to use. Falls back to default_model.
            timeout: Per-request timeout in seconds. Falls back to the
                client default.

        Returns:
            The decoded response envelope.

        Raises:
            LLMConnectionError: Server unreachable.
            LLMTimeoutError: No answer within the timeout.
            LLMResponseError: Non-2xx status or a body that is not JSON.
        """
        effective_timeout = timeout if timeout is not None else self._timeout
        payload: dict[str, Any] = {
            "model": model or self._default_model,
            "stream": False,
            "messages": messages,
        }
        url = f"{self._base_url}/api/chat"
        logger.debug("POST %s model=%s timeout=%ss", url, payload["model"], effective_timeout)

        try:
            response = self._client.post(url, json=payload, timeout=effective_timeout)
        except httpx.TimeoutException as exc:
            raise LLMTimeoutError(effective_timeout) from exc
        except httpx.TransportError as exc:
            raise LLMConnectionError(
                f"Failed to connect to Ollama at {self._base_url}. "
                f"Make sure Ollama is running ({exc})."
            ) from exc

        if response.is_error:
            raise LLMResponseError(
                f"Ollama API request failed with status: {response.status_code} - "
                f"{response.text.strip()}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise LLMResponseError(f"Failed to parse Ollama response as JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise LLMResponseError(f"Unexpected response format: {data!r}")
        return data

    @staticmethod
    def extract_content(response: dict) -> str:
        """Extract ``message.content`` from a response dict.

        Raises:
            LLMResponseError: If the envelope has no string content.
        """
        message = response.get("message")
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise LLMResponseError(
                f"Failed to extract content from Ollama response: {response}"
            )
        return content

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()

    def __enter__(self) -> OllamaClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
