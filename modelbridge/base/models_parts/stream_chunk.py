"""
Streaming chunk DTO.

A stream is a sequence of zero or more ``TEXT_DELTA``/``TOOL_CALL_DELTA``
chunks followed by exactly one terminal chunk (``FINISH`` or ``ERROR``).
Use the constructor helpers rather than filling fields by hand so that each
chunk only carries the fields meaningful for its type.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .finish_reason import FinishReason
from .tool_definition import ToolCall
from .usage import Usage


class ChunkType(str, Enum):
    TEXT_DELTA = "text_delta"
    TOOL_CALL_DELTA = "tool_call_delta"
    FINISH = "finish"
    ERROR = "error"


@dataclass(frozen=True)
class StreamChunk:
    type: ChunkType
    delta: Optional[str] = None
    tool_call: Optional[ToolCall] = None
    finish_reason: Optional[FinishReason] = None
    usage: Optional[Usage] = None
    error_message: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.type in (ChunkType.FINISH, ChunkType.ERROR)

    @classmethod
    def text_delta(cls, delta: str) -> "StreamChunk":
        return cls(ChunkType.TEXT_DELTA, delta=delta)

    @classmethod
    def tool_call_delta(cls, tool_call: ToolCall, delta: Optional[str] = None) -> "StreamChunk":
        """Partial tool call. ``delta`` is the argument fragment carried by this chunk."""
        return cls(ChunkType.TOOL_CALL_DELTA, delta=delta, tool_call=tool_call)

    @classmethod
    def finish(
        cls,
        finish_reason: FinishReason = FinishReason.STOP,
        usage: Optional[Usage] = None,
    ) -> "StreamChunk":
        return cls(ChunkType.FINISH, finish_reason=finish_reason, usage=usage)

    @classmethod
    def error(cls, message: str, usage: Optional[Usage] = None) -> "StreamChunk":
        return cls(ChunkType.ERROR, error_message=message, usage=usage)


__all__ = ["ChunkType", "StreamChunk"]
