from __future__ import annotations

import pytest
from pydantic import ValidationError

from modelbridge import GenerateTextOptions, generate_text
from modelbridge.base.cancellation import CancellationToken, CancelledError
from modelbridge.base.errors import ErrorCode, InvalidPromptError, ProviderError
from modelbridge.base.models import Message, Role, ToolDefinition
from modelbridge.mock import MockLanguageModel


@pytest.mark.asyncio
async def test_messages_are_system_then_prompt_then_explicit(mock_model):
    history = [Message.assistant("earlier"), Message.user("follow-up")]
    options = GenerateTextOptions(system="be brief", prompt="question", messages=history)
    result = await generate_text(mock_model, options)
    sent = mock_model.calls[0].messages
    assert [m.role for m in sent] == [Role.SYSTEM, Role.USER, Role.ASSISTANT, Role.USER]  # nosec B101
    assert [m.content for m in sent] == ["be brief", "question", "earlier", "follow-up"]  # nosec B101
    assert result.text == "This is a mock response."  # nosec B101


@pytest.mark.asyncio
async def test_sampling_and_tool_options_are_forwarded(mock_model):
    tool = ToolDefinition("lookup", "find things", {"type": "object"})
    options = GenerateTextOptions(
        prompt="q",
        max_tokens=64,
        temperature=0.3,
        top_p=0.9,
        top_k=40,
        stop_sequences=["END"],
        seed=7,
        tools=[tool],
        tool_choice="auto",
        provider_options={"vendor": {"flag": True}},
    )
    await generate_text(mock_model, options)
    call = mock_model.calls[0]
    assert (call.max_tokens, call.temperature, call.top_p, call.top_k, call.seed) == (64, 0.3, 0.9, 40, 7)  # nosec B101
    assert call.stop_sequences == ("END",) and call.tools == (tool,) and call.tool_choice == "auto"  # nosec B101
    assert call.provider_options == {"vendor": {"flag": True}}  # nosec B101


@pytest.mark.asyncio
async def test_missing_prompt_fails_before_model_contact(mock_model):
    with pytest.raises(InvalidPromptError):
        await generate_text(mock_model, GenerateTextOptions())
    with pytest.raises(InvalidPromptError):
        await generate_text(mock_model, GenerateTextOptions(prompt="", messages=[]))
    assert mock_model.calls == []  # nosec B101


@pytest.mark.asyncio
async def test_options_are_not_mutated(mock_model):
    history = [Message.user("hi")]
    options = GenerateTextOptions(system="s", messages=history)
    await generate_text(mock_model, options)
    assert options.system == "s" and options.prompt is None  # nosec B101
    assert options.messages == [Message.user("hi")] and history == [Message.user("hi")]  # nosec B101


@pytest.mark.asyncio
async def test_provider_errors_propagate_unchanged():
    failure = ProviderError(code=ErrorCode.AUTH, message="bad key", provider="mock")
    with pytest.raises(ProviderError) as info:
        await generate_text(MockLanguageModel(error=failure), GenerateTextOptions(prompt="q"))
    assert info.value is failure  # nosec B101


@pytest.mark.asyncio
async def test_cancelled_token_stops_the_call(mock_model):
    with pytest.raises(CancelledError):
        await generate_text(mock_model, GenerateTextOptions(prompt="q"), CancellationToken.already_cancelled())
    assert mock_model.calls == []  # nosec B101


def test_option_bounds_are_validated():
    with pytest.raises(ValidationError):
        GenerateTextOptions(prompt="q", temperature=3.5)
    with pytest.raises(ValidationError):
        GenerateTextOptions(prompt="q", max_tokens=0)
