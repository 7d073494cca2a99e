"""
Tool DTOs: the caller-supplied ``ToolDefinition`` and the model-produced
``ToolCall``.

``ToolCall.arguments`` holds the raw JSON text emitted by the model so that
structured-output callers can report exactly what failed to parse.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ToolDefinition:
    """A tool the model may call.

    Attributes:
        name: Tool name, unique within one call.
        description: Human-readable description shown to the model.
        parameters: JSON Schema document describing the tool arguments.
    """

    name: str
    description: str = ""
    parameters: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by the model.

    Attributes:
        tool_call_id: Provider-assigned id used to correlate the tool result.
        tool_name: Name of the tool being called.
        arguments: Raw JSON text of the call arguments.
    """

    tool_call_id: str
    tool_name: str
    arguments: str = "{}"

    def parsed_arguments(self) -> Dict[str, Any]:
        """Decode ``arguments`` into a mapping.

        Raises:
            ValueError: If the arguments are not a JSON object.
        """
        data = json.loads(self.arguments) if self.arguments.strip() else {}
        if not isinstance(data, dict):
            raise ValueError(f"tool call '{self.tool_name}' arguments must be a JSON object")
        return data


__all__ = ["ToolDefinition", "ToolCall"]
