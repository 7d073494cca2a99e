"""Bridge from Model Context Protocol servers to ``ToolExecutor``.

Only the client contract is defined here; the MCP transport (stdio, HTTP) is
supplied by the host application as an ``McpClient`` implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

from ..base.cancellation import CancellationToken, raise_if_cancelled
from ..base.models import ToolDefinition


@dataclass(frozen=True)
class McpToolDefinition:
    """A tool as advertised by an MCP server."""

    name: str
    description: Optional[str] = None
    input_schema: Mapping[str, Any] = field(default_factory=dict)

    def to_tool_definition(self) -> ToolDefinition:
        return ToolDefinition(name=self.name, description=self.description or "", parameters=self.input_schema)


@runtime_checkable
class McpClient(Protocol):
    @property
    def is_connected(self) -> bool: ...

    async def connect(self, cancel: Optional[CancellationToken] = None) -> None: ...

    async def list_tools(self, cancel: Optional[CancellationToken] = None) -> Sequence[McpToolDefinition]: ...

    async def call_tool(self, tool_name: str, arguments: str, cancel: Optional[CancellationToken] = None) -> str: ...


class McpToolExecutor:
    """Runs one MCP tool by forwarding the raw argument JSON to the server."""

    def __init__(self, client: McpClient, tool: McpToolDefinition) -> None:
        self._client = client
        self._tool = tool

    @property
    def name(self) -> str:
        return self._tool.name

    @property
    def definition(self) -> ToolDefinition:
        return self._tool.to_tool_definition()

    async def execute(self, arguments: str, cancel: Optional[CancellationToken] = None) -> str:
        raise_if_cancelled(cancel)
        return await self._client.call_tool(self._tool.name, arguments or "{}", cancel)


class McpToolProvider:
    """Lists an MCP server's tools as executors and definitions."""

    def __init__(self, client: McpClient) -> None:
        self._client = client

    async def _tools(self, cancel: Optional[CancellationToken]) -> Sequence[McpToolDefinition]:
        if not self._client.is_connected:
            await self._client.connect(cancel)
        return await self._client.list_tools(cancel)

    async def get_tool_executors(self, cancel: Optional[CancellationToken] = None) -> Dict[str, McpToolExecutor]:
        return {t.name: McpToolExecutor(self._client, t) for t in await self._tools(cancel)}

    async def get_tool_definitions(self, cancel: Optional[CancellationToken] = None) -> List[ToolDefinition]:
        return [t.to_tool_definition() for t in await self._tools(cancel)]


__all__ = ["McpToolDefinition", "McpClient", "McpToolExecutor", "McpToolProvider"]
