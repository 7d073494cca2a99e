"""In-process tool router.

Maps tool names to ``ToolExecutor`` instances and turns model ``ToolCall``s
into ``ToolResult`` envelopes. Unknown tools and executor failures come back
as ``ok=False`` results so an agent loop can report them to the model; only
cancellation propagates.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..base.cancellation import CancellationToken, CancelledError, raise_if_cancelled
from ..base.dto.tool_result import ToolResult
from ..base.errors import classify_exception, error_kind
from ..base.interfaces import ToolExecutor
from ..base.logging import get_logger, log_event
from ..base.models import ToolCall, ToolDefinition

NOT_FOUND = "not_found"


class ToolRouter:
    """Registry-based tool dispatcher.

    Contract:
        - Register executors with ``register``; the key is ``definition.name``.
        - ``invoke`` never raises for tool failures, only for cancellation.
    """

    def __init__(self, executors: Optional[Iterable[ToolExecutor]] = None) -> None:
        self._executors: Dict[str, ToolExecutor] = {}
        self._logger = get_logger("modelbridge.tools")
        for executor in executors or ():
            self.register(executor)

    def register(self, executor: ToolExecutor) -> "ToolRouter":
        self._executors[executor.definition.name] = executor
        return self

    def get(self, name: str) -> Optional[ToolExecutor]:
        return self._executors.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._executors

    def definitions(self) -> List[ToolDefinition]:
        """Definitions of all registered tools, for ``GenerateTextOptions.tools``."""
        return [e.definition for e in self._executors.values()]

    async def invoke(self, tool_call: ToolCall, cancel: Optional[CancellationToken] = None) -> ToolResult:
        """Run the executor named by ``tool_call``.

        Raises:
            CancelledError: ``cancel`` was observed.
        """
        raise_if_cancelled(cancel)
        executor = self._executors.get(tool_call.tool_name)
        if executor is None:
            return ToolResult(
                tool_call_id=tool_call.tool_call_id,
                tool_name=tool_call.tool_name,
                ok=False,
                code=NOT_FOUND,
                error=f"tool '{tool_call.tool_name}' not registered",
            )
        try:
            content = await executor.execute(tool_call.arguments, cancel)
        except CancelledError:
            raise
        except Exception as exc:
            kind = error_kind(exc)
            code = kind.value if kind is not None else classify_exception(exc).value
            log_event(
                self._logger,
                "tool.error",
                level=logging.WARNING,
                tool=tool_call.tool_name,
                tool_call_id=tool_call.tool_call_id,
                error_code=code,
                error=str(exc),
            )
            return ToolResult(
                tool_call_id=tool_call.tool_call_id,
                tool_name=tool_call.tool_name,
                ok=False,
                code=code,
                error=str(exc),
            )
        return ToolResult(
            tool_call_id=tool_call.tool_call_id,
            tool_name=tool_call.tool_name,
            ok=True,
            content=content,
        )

    async def invoke_all(
        self, tool_calls: Iterable[ToolCall], cancel: Optional[CancellationToken] = None
    ) -> List[ToolResult]:
        """Invoke calls sequentially, preserving their order."""
        return [await self.invoke(call, cancel) for call in tool_calls]


__all__ = ["ToolRouter", "NOT_FOUND"]
