"""Ordering, transformation and isolation of composed middleware."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import AsyncIterator, List

import pytest

from modelbridge.base.models import (
    ChunkType,
    FinishReason,
    GenerateResult,
    LanguageModelCallOptions,
    Message,
    StreamChunk,
)
from modelbridge.middleware import LanguageModelMiddleware, MiddlewareLanguageModel, with_middleware
from modelbridge.mock import MockLanguageModel
from modelbridge.tests.utils import assert_true


def _opts(text: str = "") -> LanguageModelCallOptions:
    return LanguageModelCallOptions(messages=[Message.user(text)])


def _echo(options: LanguageModelCallOptions) -> GenerateResult:
    return GenerateResult(finish_reason=FinishReason.STOP, text=options.messages[-1].content)


class _Tagger(LanguageModelMiddleware):
    """Appends its tag to the prompt going in and to the text coming out."""

    def __init__(self, tag: str, log: List[str]) -> None:
        self.tag = tag
        self.log = log

    async def generate(self, options, model, next_, cancel=None):
        self.log.append(f"{self.tag}:request")
        last = options.messages[-1]
        tagged = replace(options, messages=[*options.messages[:-1], replace(last, content=last.content + self.tag)])
        result = await next_(tagged, cancel)
        self.log.append(f"{self.tag}:response")
        return replace(result, text=(result.text or "") + self.tag)

    async def stream(self, options, model, next_, cancel=None) -> AsyncIterator[StreamChunk]:
        async for chunk in next_(options, cancel):
            if chunk.type is ChunkType.TEXT_DELTA:
                yield StreamChunk.text_delta((chunk.delta or "").upper() + self.tag)
            else:
                yield chunk


@pytest.mark.asyncio
async def test_request_and_response_ordering() -> None:
    log: List[str] = []
    model = with_middleware(MockLanguageModel(responder=_echo), _Tagger("A", log), _Tagger("B", log))
    result = await model.generate(_opts(""))
    # prompt "" -> "A" -> "AB"; inner echoes "AB"; B then A append on the way out.
    assert_true(result.text == "ABBA", f"unexpected text {result.text!r}")
    assert_true(log == ["A:request", "B:request", "B:response", "A:response"], "hook ordering")


@pytest.mark.asyncio
async def test_stream_transform_keeps_single_terminal() -> None:
    inner = MockLanguageModel(streams=[[StreamChunk.text_delta("hi"), StreamChunk.text_delta("yo"), StreamChunk.finish()]])
    model = with_middleware(inner, _Tagger("!", []))
    chunks = [c async for c in model.stream(_opts("x"))]
    assert_true([c.delta for c in chunks[:-1]] == ["HI!", "YO!"], "deltas transformed")
    assert_true(sum(1 for c in chunks if c.is_terminal) == 1 and chunks[-1].is_terminal, "one terminal chunk last")


@pytest.mark.asyncio
async def test_pass_through_base_changes_nothing() -> None:
    inner = MockLanguageModel(text="plain")
    model = with_middleware(inner, LanguageModelMiddleware())
    result = await model.generate(_opts("q"))
    chunks = [c async for c in model.stream(_opts("q"))]
    assert_true(result.text == "plain", "generate unchanged")
    assert_true("".join(c.delta or "" for c in chunks if not c.is_terminal) == "plain", "stream unchanged")


def test_wrapping_is_flattened_and_identity_preserved() -> None:
    inner = MockLanguageModel(provider="p", model_id="m", supported_urls={"image/*": ["https://.*"]})
    a, b = LanguageModelMiddleware(), LanguageModelMiddleware()
    once = with_middleware(inner, a)
    twice = with_middleware(once, b)
    assert_true(isinstance(twice, MiddlewareLanguageModel), "composed model")
    assert_true(twice.inner_model is inner and twice.middlewares == (a, b), "flattened chain")
    assert_true(twice.provider == "p" and twice.model_id == "m", "identity delegated")
    assert_true(twice.supported_urls == {"image/*": ["https://.*"]}, "urls delegated")
    assert_true(with_middleware(inner) is inner, "no middleware returns model")


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_share_state() -> None:
    class _Slow(LanguageModelMiddleware):
        async def generate(self, options, model, next_, cancel=None):
            prompt = options.messages[-1].content
            await asyncio.sleep(0.01 if prompt == "first" else 0)
            result = await next_(options, cancel)
            return replace(result, text=f"{prompt}:{result.text}")

    model = with_middleware(MockLanguageModel(responder=_echo), _Slow())
    first, second = await asyncio.gather(model.generate(_opts("first")), model.generate(_opts("second")))
    assert_true(first.text == "first:first", "first call isolated")
    assert_true(second.text == "second:second", "second call isolated")
