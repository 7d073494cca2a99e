"""OpenTelemetry spans for model calls.

Spans follow the GenAI semantic conventions. Without an SDK configured the
OpenTelemetry API hands out non-recording spans, so instrumentation is always
safe to call. Spans are started detached (not as the current span) because a
streaming span stays open across ``yield`` points of an async generator.
"""
from __future__ import annotations

from typing import Optional

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

from .models import GenerateResult, LanguageModelCallOptions, Usage

TRACER_NAME = "modelbridge"

SYSTEM = "gen_ai.system"
REQUEST_MODEL = "gen_ai.request.model"
REQUEST_MAX_TOKENS = "gen_ai.request.max_tokens"
REQUEST_TEMPERATURE = "gen_ai.request.temperature"
REQUEST_TOP_P = "gen_ai.request.top_p"
RESPONSE_FINISH_REASONS = "gen_ai.response.finish_reasons"
USAGE_INPUT_TOKENS = "gen_ai.usage.input_tokens"
USAGE_OUTPUT_TOKENS = "gen_ai.usage.output_tokens"

REQUEST_STREAMING = "gen_ai.request.streaming"

GENERATE_SPAN = "gen_ai.generate_text"
STREAM_SPAN = "gen_ai.stream_text"


def get_tracer():
    return trace.get_tracer(TRACER_NAME)


def start_model_span(
    provider: str, model_id: str, options: LanguageModelCallOptions, *, streaming: bool = False
) -> Span:
    """Start a detached span describing one model call. The caller must ``end()`` it."""
    span = get_tracer().start_span(STREAM_SPAN if streaming else GENERATE_SPAN)
    span.set_attribute(SYSTEM, provider)
    span.set_attribute(REQUEST_MODEL, model_id)
    span.set_attribute(REQUEST_STREAMING, streaming)
    if options.max_tokens is not None:
        span.set_attribute(REQUEST_MAX_TOKENS, options.max_tokens)
    if options.temperature is not None:
        span.set_attribute(REQUEST_TEMPERATURE, options.temperature)
    if options.top_p is not None:
        span.set_attribute(REQUEST_TOP_P, options.top_p)
    return span


def record_usage(span: Span, usage: Optional[Usage], finish_reason: Optional[str] = None) -> None:
    if usage is not None:
        if usage.input_tokens is not None:
            span.set_attribute(USAGE_INPUT_TOKENS, usage.input_tokens)
        if usage.output_tokens is not None:
            span.set_attribute(USAGE_OUTPUT_TOKENS, usage.output_tokens)
    if finish_reason is not None:
        span.set_attribute(RESPONSE_FINISH_REASONS, [finish_reason])


def record_result(span: Span, result: GenerateResult) -> None:
    record_usage(span, result.usage, result.finish_reason.value)


def record_failure(span: Span, exc: BaseException) -> None:
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR, str(exc)))


__all__ = [
    "get_tracer",
    "start_model_span",
    "record_usage",
    "record_result",
    "record_failure",
    "GENERATE_SPAN",
    "STREAM_SPAN",
]
