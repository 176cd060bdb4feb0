"""Prompt templates used by LLM-backed operations."""

from branchdesc.prompts.summarize import (
    DEFAULT_SUMMARIZE_SYSTEM,
    DIFF_SUMMARIZE_SYSTEM,
    build_summarize_messages,
    looks_like_diff,
)

__all__ = [
    "DEFAULT_SUMMARIZE_SYSTEM",
    "DIFF_SUMMARIZE_SYSTEM",
    "build_summarize_messages",
    "looks_like_diff",
]
