"""Result DTO for a non-streaming generation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from .finish_reason import FinishReason
from .tool_definition import ToolCall
from .usage import Usage


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of ``LanguageModel.generate``.

    Attributes:
        finish_reason: Normalized reason the generation ended.
        usage: Token accounting; individual counters may be unknown.
        text: Generated text, if any.
        tool_calls: Tool invocations requested by the model, in model order.
        warnings: Non-fatal notices from the provider (unsupported settings).
        raw_finish_reason: Vendor finish reason before normalization.
        provider_metadata: Opaque vendor-specific extras.
    """

    finish_reason: FinishReason
    usage: Usage = field(default_factory=Usage)
    text: Optional[str] = None
    tool_calls: Optional[Sequence[ToolCall]] = None
    warnings: Optional[Sequence[str]] = None
    raw_finish_reason: Optional[str] = None
    provider_metadata: Optional[Mapping[str, Any]] = None


__all__ = ["GenerateResult"]
