"""Validated request option DTOs for the high-level client API."""

from .generate_options import (
    GenerateObjectOptions,
    GenerateTextOptions,
    ObjectMode,
    PromptOptions,
    StreamObjectOptions,
)
from .tool_result import ToolResult

__all__ = [
    "PromptOptions",
    "GenerateTextOptions",
    "GenerateObjectOptions",
    "StreamObjectOptions",
    "ObjectMode",
    "ToolResult",
]
