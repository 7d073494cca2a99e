"""
High-level generation API.

Four entry points sit on top of any ``LanguageModel`` (plain adapter, mock or
middleware-composed):

- ``generate_text`` / ``stream_text``: prompt assembly plus one model call.
- ``generate_object`` / ``stream_object``: structured output parsed into a
  caller-chosen type, in ``"json"`` or ``"tool"`` mode.

Prompt assembly order is system message, then the user prompt, then the
caller's explicit messages. A request with none of these fails with
``InvalidPromptError`` before the model is contacted; for the streaming
functions that happens when the function is called, not on first iteration.

Each call makes exactly one model invocation. Retries, caching and fallback
belong in middleware.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, List, Optional, Type, TypeVar

from .base.cancellation import CancellationToken, raise_if_cancelled
from .base.dto import GenerateObjectOptions, GenerateTextOptions, PromptOptions, StreamObjectOptions
from .base.errors import InvalidPromptError, SchemaValidationError, ToolInvocationError
from .base.interfaces import LanguageModel
from .base.log_support import LogContext
from .base.logging import get_logger, log_event
from .base.models import (
    ChunkType,
    GenerateObjectResult,
    GenerateResult,
    LanguageModelCallOptions,
    Message,
    ObjectChunk,
    StreamChunk,
    ToolCall,
)
from .base.streaming import guard_stream
from .structured import ObjectRequest, build_object_request, parse_object, strip_fences, try_parse_partial

T = TypeVar("T")


def _logger() -> logging.Logger:
    return get_logger("modelbridge.client")


def build_messages(options: PromptOptions) -> List[Message]:
    """Assemble the message list for ``options``.

    Raises:
        InvalidPromptError: No system text, prompt or message was supplied.
    """
    messages: List[Message] = []
    if options.system:
        messages.append(Message.system(options.system))
    if options.prompt:
        messages.append(Message.user(options.prompt))
    if options.messages:
        messages.extend(options.messages)
    if not messages:
        raise InvalidPromptError("Either prompt or messages must be provided.")
    return messages


def _text_call_options(options: GenerateTextOptions) -> LanguageModelCallOptions:
    return LanguageModelCallOptions(
        messages=build_messages(options),
        tools=options.tools,
        tool_choice=options.tool_choice,
        response_format=options.response_format,
        **options.sampling_kwargs(),
    )


async def generate_text(
    model: LanguageModel,
    options: GenerateTextOptions,
    cancel: Optional[CancellationToken] = None,
) -> GenerateResult:
    """Generate text (and/or tool calls) in one model call.

    Raises:
        InvalidPromptError: No prompt and no messages.
        CancelledError: ``cancel`` was observed.
        ProviderError: Propagated unchanged from the model.
    """
    call_options = _text_call_options(options)
    raise_if_cancelled(cancel)
    return await model.generate(call_options, cancel)


def stream_text(
    model: LanguageModel,
    options: GenerateTextOptions,
    cancel: Optional[CancellationToken] = None,
) -> AsyncIterator[StreamChunk]:
    """Stream chunks from one model call, ending with exactly one terminal chunk.

    Cancellation raises ``CancelledError`` from the iterator; no terminal
    chunk is produced in that case.
    """
    call_options = _text_call_options(options)
    ctx = LogContext(provider=model.provider, model=model.model_id)
    return guard_stream(model.stream(call_options, cancel), cancel, logger=_logger(), ctx=ctx)


def _select_tool_call(result: GenerateResult, tool_name: str, ctx: LogContext) -> ToolCall:
    calls = list(result.tool_calls or ())
    if not calls:
        raise ToolInvocationError(f"Expected a call to tool '{tool_name}' but the model made none.", tool_name)
    matching = [c for c in calls if c.tool_name == tool_name]
    chosen = matching[0] if matching else calls[0]
    if len(calls) > 1:
        log_event(
            _logger(),
            "object.extra_tool_calls",
            ctx,
            level=logging.WARNING,
            tool_calls=len(calls),
            used=chosen.tool_call_id,
        )
    return chosen


async def generate_object(
    model: LanguageModel,
    output_type: Type[T],
    options: GenerateObjectOptions,
    cancel: Optional[CancellationToken] = None,
) -> GenerateObjectResult[T]:
    """Generate one object of ``output_type``.

    Tool mode parses the arguments of the forced tool call; JSON mode parses
    the fence-stripped response text.

    Raises:
        InvalidPromptError: No prompt and no messages.
        ToolInvocationError: Tool mode and the model made no tool call.
        SchemaValidationError: The output does not parse as ``output_type``;
            carries the raw text.
    """
    request = build_object_request(output_type, options, build_messages(options))
    ctx = LogContext(provider=model.provider, model=model.model_id, extra={"mode": request.mode})
    raise_if_cancelled(cancel)
    result = await model.generate(request.call_options, cancel)

    try:
        if request.tool_name is not None:
            raw_text = _select_tool_call(result, request.tool_name, ctx).arguments
            obj = parse_object(output_type, raw_text)
        else:
            raw_text = result.text or ""
            obj = parse_object(output_type, strip_fences(raw_text), raw_text=raw_text)
    except SchemaValidationError as exc:
        log_event(_logger(), "object.parse_failed", ctx, level=logging.WARNING, error=exc.message)
        raise

    log_event(_logger(), "object.complete", ctx, finish_reason=result.finish_reason.value)
    return GenerateObjectResult(
        object=obj,
        finish_reason=result.finish_reason,
        usage=result.usage,
        raw_text=raw_text,
        warnings=result.warnings,
    )


def _chunk_text(chunk: StreamChunk, request: ObjectRequest) -> Optional[str]:
    if chunk.type is ChunkType.TEXT_DELTA:
        return chunk.delta or None
    if chunk.type is ChunkType.TOOL_CALL_DELTA and request.is_tool_mode:
        return chunk.delta or None
    return None


def stream_object(
    model: LanguageModel,
    output_type: Type[T],
    options: StreamObjectOptions,
    cancel: Optional[CancellationToken] = None,
) -> AsyncIterator[ObjectChunk[T]]:
    """Stream partial objects of ``output_type``.

    Every non-terminal model chunk yields one ``ObjectChunk`` whose
    ``accumulated_text`` is the concatenation of all deltas so far and whose
    ``object`` is the best-effort parse of it. The stream ends with exactly
    one chunk where ``is_complete`` is set; parse failures are reported in its
    ``error`` field, never raised.

    When the model stream ends with an error chunk the final chunk carries
    that message and no object, even if the text received so far parses.

    ``options.on_chunk`` is called with each non-empty delta before the
    corresponding chunk is yielded.
    """
    request = build_object_request(output_type, options, build_messages(options))
    return _stream_object(model, output_type, request, options, cancel)


async def _stream_object(
    model: LanguageModel,
    output_type: Type[T],
    request: ObjectRequest,
    options: StreamObjectOptions,
    cancel: Optional[CancellationToken],
) -> AsyncIterator[ObjectChunk[T]]:
    ctx = LogContext(provider=model.provider, model=model.model_id, extra={"mode": request.mode})
    accumulated = ""
    last: Optional[StreamChunk] = None
    async for chunk in guard_stream(model.stream(request.call_options, cancel), cancel, logger=_logger(), ctx=ctx):
        last = chunk
        if chunk.is_terminal:
            continue
        delta = _chunk_text(chunk, request)
        if delta is not None:
            accumulated += delta
            if options.on_chunk is not None:
                options.on_chunk(delta)
        yield ObjectChunk(
            accumulated_text=accumulated,
            object=try_parse_partial(output_type, accumulated),
            delta=delta,
        )

    obj: Optional[T] = None
    error: Optional[str] = None
    try:
        obj = parse_object(output_type, strip_fences(accumulated), raw_text=accumulated)
    except SchemaValidationError as exc:
        error = exc.message
        log_event(_logger(), "object.parse_failed", ctx, level=logging.WARNING, error=error)
    if last is not None and last.type is ChunkType.ERROR:
        obj = None
        error = last.error_message or "stream failed"
    if error is None:
        log_event(_logger(), "object.complete", ctx, chars=len(accumulated))
    yield ObjectChunk(
        accumulated_text=accumulated,
        object=obj,
        is_complete=True,
        error=error,
        usage=last.usage if last is not None else None,
    )


__all__ = ["generate_text", "stream_text", "generate_object", "stream_object", "build_messages"]
