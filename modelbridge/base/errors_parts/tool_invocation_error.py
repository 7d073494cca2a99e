"""Raised when an expected tool call is missing or a tool cannot be invoked."""
from __future__ import annotations

from typing import ClassVar, Optional

from .base_error import ModelBridgeError
from .error_kind import ErrorKind


class ToolInvocationError(ModelBridgeError):
    """Tool call failure.

    Attributes:
        tool_name: Name of the tool involved, when known.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.TOOL_INVOCATION

    def __init__(self, message: str, tool_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.tool_name = tool_name


__all__ = ["ToolInvocationError"]
