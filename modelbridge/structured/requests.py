"""
Request construction for structured-output calls.

JSON mode rewrites the system message to carry the schema instruction; tool
mode synthesizes a single tool whose parameters are the output schema and
forces the model to call it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from ..base.dto import GenerateObjectOptions
from ..base.models import LanguageModelCallOptions, Message, Role, ToolDefinition
from ..base.schema import schema_for, schema_json, type_name
from ..config import get_settings
from ..config.defaults import OBJECT_TOOL_DESCRIPTION, SCHEMA_INSTRUCTION


@dataclass(frozen=True)
class ObjectRequest:
    """A prepared structured-output call.

    ``tool_name`` is set in tool mode and names the tool whose call carries
    the object.
    """

    call_options: LanguageModelCallOptions
    mode: str
    tool_name: Optional[str] = None

    @property
    def is_tool_mode(self) -> bool:
        return self.tool_name is not None


def _json_mode_messages(system: Optional[str], messages: Sequence[Message], output_type: Any) -> List[Message]:
    instruction = (system or "") + SCHEMA_INSTRUCTION + schema_json(output_type)
    rest = [m for m in messages if m.role is not Role.SYSTEM]
    return [Message.system(instruction), *rest]


def build_object_request(
    output_type: Any, options: GenerateObjectOptions, messages: Sequence[Message]
) -> ObjectRequest:
    """Turn ``options`` and the already-built ``messages`` into an ``ObjectRequest``."""
    mode = options.mode or get_settings().object_mode
    sampling = options.sampling_kwargs()
    if mode == "tool":
        name = options.name or type_name(output_type)
        tool = ToolDefinition(
            name=name,
            description=options.description or OBJECT_TOOL_DESCRIPTION.format(type_name=type_name(output_type)),
            parameters=schema_for(output_type),
        )
        call_options = LanguageModelCallOptions(messages=messages, tools=[tool], tool_choice=name, **sampling)
        return ObjectRequest(call_options=call_options, mode=mode, tool_name=name)
    call_options = LanguageModelCallOptions(
        messages=_json_mode_messages(options.system, messages, output_type),
        response_format="json",
        **sampling,
    )
    return ObjectRequest(call_options=call_options, mode=mode)


__all__ = ["ObjectRequest", "build_object_request"]
