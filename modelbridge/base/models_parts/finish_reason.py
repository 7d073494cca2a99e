"""Normalized finish reasons reported by language models."""
from __future__ import annotations

from enum import Enum


class FinishReason(str, Enum):
    """Why a generation ended. Values are stable for logging and caching."""

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    OTHER = "other"


__all__ = ["FinishReason"]
