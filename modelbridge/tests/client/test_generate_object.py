from __future__ import annotations

import json
from typing import Dict

import pytest
from pydantic import BaseModel

from modelbridge import GenerateObjectOptions, generate_object
from modelbridge.base.errors import ErrorKind, SchemaValidationError, ToolInvocationError, error_kind
from modelbridge.base.models import FinishReason, GenerateResult, Message, Role, ToolCall, Usage
from modelbridge.config.defaults import SCHEMA_INSTRUCTION
from modelbridge.mock import MockLanguageModel


class Person(BaseModel):
    name: str
    age: int


def _text_model(text: str) -> MockLanguageModel:
    return MockLanguageModel(
        results=[GenerateResult(finish_reason=FinishReason.STOP, text=text, usage=Usage(input_tokens=5, output_tokens=7))]
    )


def _tool_model(*calls: ToolCall) -> MockLanguageModel:
    return MockLanguageModel(results=[GenerateResult(finish_reason=FinishReason.TOOL_CALLS, tool_calls=calls)])


@pytest.mark.asyncio
async def test_json_mode_parses_fenced_case_insensitive_text():
    model = _text_model('```json\n{"Name": "Ada", "AGE": 36}\n```')
    result = await generate_object(model, Person, GenerateObjectOptions(prompt="who?"))
    assert result.object == Person(name="Ada", age=36)  # nosec B101
    assert result.raw_text.startswith("```json")  # nosec B101
    assert result.usage.output_tokens == 7 and result.finish_reason is FinishReason.STOP  # nosec B101


@pytest.mark.asyncio
async def test_json_mode_replaces_caller_system_messages():
    model = _text_model('{"name": "Ada", "age": 36}')
    options = GenerateObjectOptions(
        system="You extract people.",
        messages=[Message.system("ignored"), Message.user("text"), Message.assistant("ok")],
    )
    await generate_object(model, Person, options)
    sent = model.calls[0].messages
    assert [m.role for m in sent] == [Role.SYSTEM, Role.USER, Role.ASSISTANT]  # nosec B101
    system = sent[0].content
    assert system.startswith("You extract people." + SCHEMA_INSTRUCTION)  # nosec B101
    schema = json.loads(system[len("You extract people." + SCHEMA_INSTRUCTION):])
    assert set(schema["properties"]) == {"name", "age"}  # nosec B101
    assert model.calls[0].tools is None  # nosec B101


@pytest.mark.asyncio
async def test_json_mode_without_system_uses_instruction_only():
    model = _text_model('{"name": "Ada", "age": 36}')
    await generate_object(model, Person, GenerateObjectOptions(prompt="p"))
    assert model.calls[0].messages[0].content.startswith(SCHEMA_INSTRUCTION)  # nosec B101


@pytest.mark.asyncio
async def test_json_mode_invalid_output_raises_with_raw_text():
    model = _text_model("I cannot answer that")
    with pytest.raises(SchemaValidationError) as info:
        await generate_object(model, Person, GenerateObjectOptions(prompt="p"))
    assert info.value.raw_text == "I cannot answer that"  # nosec B101
    assert error_kind(info.value) is ErrorKind.SCHEMA_VALIDATION  # nosec B101


@pytest.mark.asyncio
async def test_tool_mode_forces_a_single_schema_tool():
    model = _tool_model(ToolCall("call_1", "Person", '{"name": "Ada", "age": 36}'))
    result = await generate_object(model, Person, GenerateObjectOptions(prompt="p", mode="tool"))
    call = model.calls[0]
    assert len(call.tools) == 1 and call.tools[0].name == "Person"  # nosec B101
    assert call.tool_choice == "Person"  # nosec B101
    assert call.tools[0].description == "Generated Person object"  # nosec B101
    assert call.tools[0].parameters["properties"]["age"]["type"] == "integer"  # nosec B101
    assert result.object.name == "Ada" and result.raw_text == '{"name": "Ada", "age": 36}'  # nosec B101


@pytest.mark.asyncio
async def test_tool_mode_custom_name_and_plain_dict_target():
    model = _tool_model(ToolCall("c", "extract", '{"a":1}'))
    options = GenerateObjectOptions(prompt="p", mode="tool", name="extract", description="Pull fields")
    result = await generate_object(model, Dict[str, int], options)
    assert result.object == {"a": 1} and result.raw_text == '{"a":1}'  # nosec B101
    assert model.calls[0].tools[0].description == "Pull fields"  # nosec B101


@pytest.mark.asyncio
async def test_tool_mode_without_tool_calls_raises():
    model = _text_model("no tools today")
    with pytest.raises(ToolInvocationError) as info:
        await generate_object(model, Person, GenerateObjectOptions(prompt="p", mode="tool"))
    assert info.value.tool_name == "Person"  # nosec B101


@pytest.mark.asyncio
async def test_tool_mode_prefers_the_matching_call():
    model = _tool_model(
        ToolCall("c1", "other", '{"x": 1}'),
        ToolCall("c2", "Person", '{"name": "Bo", "age": 3}'),
    )
    result = await generate_object(model, Person, GenerateObjectOptions(prompt="p", mode="tool"))
    assert result.object.name == "Bo"  # nosec B101


@pytest.mark.asyncio
async def test_default_mode_comes_from_settings(monkeypatch):
    monkeypatch.setenv("MODELBRIDGE_OBJECT_MODE", "tool")
    model = _tool_model(ToolCall("c1", "Person", '{"name": "Ada", "age": 1}'))
    await generate_object(model, Person, GenerateObjectOptions(prompt="p"))
    assert model.calls[0].tool_choice == "Person"  # nosec B101


@pytest.mark.asyncio
async def test_provider_warnings_are_carried_to_the_result():
    model = MockLanguageModel(
        results=[GenerateResult(finish_reason=FinishReason.STOP, text='{"a": 1}', warnings=["temperature unsupported"])]
    )
    result = await generate_object(model, Dict[str, int], GenerateObjectOptions(prompt="p", temperature=0.3))
    assert result.object == {"a": 1}  # nosec B101
    assert list(result.warnings) == ["temperature unsupported"]  # nosec B101


@pytest.mark.asyncio
async def test_deeply_nested_output_raises_schema_validation_error():
    text = "[" * 100000
    with pytest.raises(SchemaValidationError) as info:
        await generate_object(_text_model(text), list, GenerateObjectOptions(prompt="p"))
    assert info.value.raw_text == text  # nosec B101
