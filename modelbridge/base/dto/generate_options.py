"""
Pydantic DTOs for the high-level generation calls.

Purpose
-------
Validate caller-supplied options (numeric bounds, mode names) before any model
is invoked. The facade turns these into a ``LanguageModelCallOptions``; the
DTOs themselves are frozen and never modified by the library.

Prompt rules
------------
A request needs a non-empty ``prompt`` or at least one entry in ``messages``.
That check runs when the call is made (``InvalidPromptError``), not at DTO
construction, so a base options object can be built once and reused.

Failure modes: bounds violations raise ``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from ..models import Message, ToolDefinition

ObjectMode = Literal["json", "tool"]


class PromptOptions(BaseModel):
    """Prompt and sampling settings shared by every generation call.

    Attributes:
        system: Optional system instruction placed first.
        prompt: Optional user prompt placed after ``system``.
        messages: Additional conversation messages appended in order.
        max_tokens, temperature, top_p, top_k, presence_penalty,
        frequency_penalty, stop_sequences, seed: Sampling controls passed to
            the model unchanged.
        headers: Extra transport headers for the adapter.
        provider_options: Opaque vendor-specific settings.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    system: Optional[str] = None
    prompt: Optional[str] = None
    messages: Optional[List[InstanceOf[Message]]] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, gt=0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    stop_sequences: Optional[List[str]] = None
    seed: Optional[int] = None
    headers: Optional[Dict[str, str]] = None
    provider_options: Optional[Dict[str, Any]] = None

    def sampling_kwargs(self) -> Dict[str, Any]:
        """Fields copied one-to-one into ``LanguageModelCallOptions``."""
        return {
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "top_k": self.top_k,
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "stop_sequences": self.stop_sequences,
            "seed": self.seed,
            "headers": self.headers,
            "provider_options": self.provider_options,
        }


class GenerateTextOptions(PromptOptions):
    """Options for ``generate_text`` and ``stream_text``."""

    tools: Optional[List[InstanceOf[ToolDefinition]]] = None
    tool_choice: Optional[str] = None
    response_format: Optional[str] = None


class GenerateObjectOptions(PromptOptions):
    """Options for ``generate_object``.

    Attributes:
        mode: ``"json"`` (schema instruction in the system message) or
            ``"tool"`` (single synthesized tool, forced choice). ``None`` uses
            the configured default.
        name: Tool name used in tool mode; defaults to the type name.
        description: Tool description used in tool mode.
    """

    mode: Optional[ObjectMode] = None
    name: Optional[str] = None
    description: Optional[str] = None


class StreamObjectOptions(GenerateObjectOptions):
    """Options for ``stream_object``. ``on_chunk`` receives each non-empty text delta."""

    on_chunk: Optional[Callable[[str], Any]] = None


__all__ = [
    "ObjectMode",
    "PromptOptions",
    "GenerateTextOptions",
    "GenerateObjectOptions",
    "StreamObjectOptions",
]
