"""ToolExecutor Protocol: something that can run a tool call."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..cancellation import CancellationToken
from ..models import ToolDefinition


@runtime_checkable
class ToolExecutor(Protocol):
    """Executes one tool given the raw JSON arguments from a ``ToolCall``.

    ``execute`` returns the tool output as text (JSON for structured results).
    """

    @property
    def name(self) -> str: ...

    @property
    def definition(self) -> ToolDefinition: ...

    async def execute(self, arguments: str, cancel: Optional[CancellationToken] = None) -> str: ...


__all__ = ["ToolExecutor"]
