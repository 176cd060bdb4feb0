"""LLM client infrastructure for branchdesc.

Provides the Ollama HTTP client and the pluggable LLMClient protocol used
by the summarization pass.
"""

from branchdesc.llm.client import OllamaClient
from branchdesc.llm.errors import (
    EmptySummaryError,
    LLMClientError,
    LLMConnectionError,
    LLMResponseError,
    LLMTimeoutError,
)
from branchdesc.llm.protocols import LLMClient

__all__ = [
    "OllamaClient",
    "LLMClient",
    "LLMClientError",
    "LLMConnectionError",
    "LLMTimeoutError",
    "LLMResponseError",
    "EmptySummaryError",
]
