"""Unit tests for ToolRouter: happy path, unknown tool and failure capture."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from modelbridge.base.cancellation import CancellationToken, CancelledError
from modelbridge.base.models import Role, ToolCall
from modelbridge.tools import Tool, ToolRouter


class Echo(BaseModel):
    value: str = ""


def _router() -> ToolRouter:
    def boom(_: Echo) -> str:
        raise RuntimeError("boom")

    return ToolRouter(
        [
            Tool.create("echo", "Echo input", Echo, lambda e: {"echo": e.value}),
            Tool.create("boom", "Always fails", Echo, boom),
        ]
    )


@pytest.mark.asyncio
async def test_happy_path_returns_content():
    res = await _router().invoke(ToolCall("c1", "echo", '{"value": "hello"}'))
    assert res.ok is True and res.tool_call_id == "c1" and res.tool_name == "echo"  # nosec B101
    assert res.content == '{"echo": "hello"}'  # nosec B101


@pytest.mark.asyncio
async def test_unknown_tool_returns_not_found():
    res = await _router().invoke(ToolCall("c2", "nope", "{}"))
    assert res.ok is False and res.code == "not_found"  # nosec B101


@pytest.mark.asyncio
async def test_tool_exception_captured():
    res = await _router().invoke(ToolCall("c3", "boom", "{}"))
    assert res.ok is False and "boom" in (res.error or "")  # nosec B101


@pytest.mark.asyncio
async def test_invalid_arguments_are_reported_with_kind_code():
    res = await _router().invoke(ToolCall("c4", "echo", '{"value": '))
    assert res.ok is False and res.code == "schema_validation"  # nosec B101


@pytest.mark.asyncio
async def test_invoke_all_preserves_order_and_builds_messages():
    results = await _router().invoke_all([ToolCall("a", "echo", '{"value": "1"}'), ToolCall("b", "nope", "{}")])
    assert [r.tool_call_id for r in results] == ["a", "b"]  # nosec B101
    messages = [r.to_message() for r in results]
    assert all(m.role is Role.TOOL for m in messages)  # nosec B101
    assert messages[0].name == "a" and messages[0].content == '{"echo": "1"}'  # nosec B101
    assert messages[1].content.startswith("Error:")  # nosec B101


@pytest.mark.asyncio
async def test_cancellation_is_not_swallowed():
    with pytest.raises(CancelledError):
        await _router().invoke(ToolCall("c", "echo", "{}"), CancellationToken.already_cancelled())


def test_definitions_lists_registered_tools():
    router = _router()
    assert [d.name for d in router.definitions()] == ["echo", "boom"]  # nosec B101
    assert "echo" in router and router.get("missing") is None  # nosec B101
