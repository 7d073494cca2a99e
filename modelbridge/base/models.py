"""
Core data model for the client layer.

The concrete dataclasses live in ``models_parts`` (one concern per file); this
module re-exports them so callers have a single stable import location.
"""
from __future__ import annotations

from .models_parts.call_options import LanguageModelCallOptions
from .models_parts.embedding import BatchEmbeddingResult, EmbeddingOptions, EmbeddingResult
from .models_parts.finish_reason import FinishReason
from .models_parts.generate_result import GenerateResult
from .models_parts.message import Message, Role
from .models_parts.object_result import GenerateObjectResult, ObjectChunk
from .models_parts.stream_chunk import ChunkType, StreamChunk
from .models_parts.tool_definition import ToolCall, ToolDefinition
from .models_parts.usage import Usage

__all__ = [
    "Role",
    "Message",
    "ToolDefinition",
    "ToolCall",
    "Usage",
    "FinishReason",
    "LanguageModelCallOptions",
    "GenerateResult",
    "ChunkType",
    "StreamChunk",
    "GenerateObjectResult",
    "ObjectChunk",
    "EmbeddingOptions",
    "EmbeddingResult",
    "BatchEmbeddingResult",
]
