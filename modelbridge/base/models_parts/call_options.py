"""
Fully resolved per-call options handed to a ``LanguageModel``.

Instances are immutable; middleware that needs to rewrite a call builds a new
instance with :func:`dataclasses.replace` instead of mutating the one it
received.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..errors_parts.invalid_prompt_error import InvalidPromptError
from .message import Message
from .tool_definition import ToolDefinition


@dataclass(frozen=True)
class LanguageModelCallOptions:
    """Request payload for one model invocation.

    ``messages`` must be non-empty; a call without messages is rejected at
    construction time with ``InvalidPromptError``.
    """

    messages: Sequence[Message]
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    stop_sequences: Optional[Sequence[str]] = None
    seed: Optional[int] = None
    tools: Optional[Sequence[ToolDefinition]] = None
    tool_choice: Optional[str] = None
    response_format: Optional[str] = None
    headers: Optional[Mapping[str, str]] = None
    provider_options: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        messages = tuple(self.messages or ())
        if not messages:
            raise InvalidPromptError("A model call requires at least one message.")
        object.__setattr__(self, "messages", messages)
        if self.tools is not None:
            object.__setattr__(self, "tools", tuple(self.tools))
        if self.stop_sequences is not None:
            object.__setattr__(self, "stop_sequences", tuple(self.stop_sequences))


__all__ = ["LanguageModelCallOptions"]
