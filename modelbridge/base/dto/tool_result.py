"""Tool result DTO returned by the tool router."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from ..models import Message


class ToolResult(BaseModel):
    """Outcome of one routed tool call.

    Attributes:
        tool_call_id: Id of the ``ToolCall`` this result answers.
        tool_name: Name of the tool that was invoked.
        ok: ``True`` when the tool ran successfully.
        content: Tool output text when ``ok``.
        code: Machine-readable error code when not ``ok``.
        error: Human-readable error when not ``ok``.
        metadata: Free-form data for tracing.
    """

    tool_call_id: str
    tool_name: str
    ok: bool
    content: Optional[str] = None
    code: Optional[str] = None
    error: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    def to_message(self) -> Message:
        """Render as a ``tool`` message to feed back to the model."""
        body = self.content if self.ok else f"Error: {self.error or self.code or 'tool failed'}"
        return Message.tool(body or "", self.tool_call_id)


__all__ = ["ToolResult"]
