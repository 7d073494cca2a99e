"""
Typed tools built from plain callables.

``Tool.create`` derives the tool's JSON Schema from a pydantic-compatible input
type, validates model-supplied arguments into that type before calling the
function, and serializes the return value to text for the model.
"""

from __future__ import annotations

import inspect
import json
from typing import Any, Callable, Generic, Mapping, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter

from ..base.cancellation import CancellationToken, raise_if_cancelled
from ..base.errors import SchemaValidationError
from ..base.models import ToolDefinition
from ..base.schema import schema_for, type_name, validate_as

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")

_ANY = TypeAdapter(Any)


def render_tool_output(value: Any) -> str:
    """Text as-is; everything else as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(_ANY.dump_python(value, mode="json"), ensure_ascii=False)


class Tool(Generic[InputT, OutputT]):
    """A ``ToolExecutor`` backed by a sync or async function of one typed argument."""

    def __init__(
        self,
        definition: ToolDefinition,
        input_type: Type[InputT],
        function: Callable[[InputT], Any],
    ) -> None:
        self._definition = definition
        self._input_type = input_type
        self._function = function

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        input_type: Type[InputT],
        execute: Callable[[InputT], Any],
    ) -> "Tool[InputT, Any]":
        if not name:
            raise ValueError("tool name must be non-empty")
        definition = ToolDefinition(name=name, description=description, parameters=schema_for(input_type))
        return cls(definition, input_type, execute)

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def definition(self) -> ToolDefinition:
        return self._definition

    @property
    def input_type(self) -> Type[InputT]:
        return self._input_type

    def parse_input(self, arguments: Union[str, Mapping[str, Any]]) -> InputT:
        """Validate raw JSON text (or an already decoded mapping) as the input type.

        Raises:
            SchemaValidationError: The arguments do not match the input type.
        """
        raw = arguments if isinstance(arguments, str) else json.dumps(dict(arguments))
        try:
            data = json.loads(arguments) if isinstance(arguments, str) else dict(arguments)
            return validate_as(self._input_type, data)
        except (ValueError, RecursionError) as exc:
            raise SchemaValidationError(
                f"Invalid arguments for tool '{self.name}': {exc}",
                raw_text=raw,
                target=type_name(self._input_type),
            ) from exc

    async def run(
        self, arguments: Union[str, Mapping[str, Any]], cancel: Optional[CancellationToken] = None
    ) -> Any:
        """Parse ``arguments``, call the function and return its raw result."""
        value = self.parse_input(arguments)
        raise_if_cancelled(cancel)
        result = self._function(value)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def execute(self, arguments: str, cancel: Optional[CancellationToken] = None) -> str:
        return render_tool_output(await self.run(arguments, cancel))

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Tool({self.name!r}, input={type_name(self._input_type)})"


__all__ = ["Tool", "render_tool_output"]
