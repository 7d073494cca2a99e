"""Structured logging and tracing around model calls.

Emits ``generate.start``/``generate.end``/``generate.error`` and the matching
``stream.*`` events through ``normalized_log_event`` and records one
OpenTelemetry span per call. Errors are logged and re-raised unchanged.
"""
from __future__ import annotations

import logging
import time
from typing import AsyncIterator, Optional

from ..base import tracing
from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import classify_exception
from ..base.interfaces import LanguageModel
from ..base.log_support import LogContext
from ..base.logging import get_logger, normalized_log_event
from ..base.models import ChunkType, GenerateResult, LanguageModelCallOptions, StreamChunk
from .middleware_base import GenerateNext, LanguageModelMiddleware, StreamNext


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000.0, 2)


class LoggingMiddleware(LanguageModelMiddleware):
    """Log and trace every call passing through the chain.

    Args:
        logger: Target logger; defaults to ``modelbridge.middleware.logging``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("modelbridge.middleware.logging")

    async def generate(
        self,
        options: LanguageModelCallOptions,
        model: LanguageModel,
        next_: GenerateNext,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerateResult:
        ctx = LogContext(provider=model.provider, model=model.model_id)
        span = tracing.start_model_span(model.provider, model.model_id, options)
        normalized_log_event(self._logger, "generate.start", ctx, phase="start", messages=len(options.messages))
        start = time.perf_counter()
        try:
            result = await next_(options, cancel)
            tracing.record_result(span, result)
        except Exception as exc:
            tracing.record_failure(span, exc)
            normalized_log_event(
                self._logger,
                "generate.error",
                ctx,
                phase="error",
                level=logging.ERROR,
                error_code=classify_exception(exc).value,
                error=str(exc),
                duration_ms=_elapsed_ms(start),
            )
            raise
        finally:
            span.end()
        normalized_log_event(
            self._logger,
            "generate.end",
            ctx,
            phase="finalize",
            emitted=bool(result.text or result.tool_calls),
            tokens=result.usage,
            finish_reason=result.finish_reason.value,
            duration_ms=_elapsed_ms(start),
        )
        return result

    async def stream(
        self,
        options: LanguageModelCallOptions,
        model: LanguageModel,
        next_: StreamNext,
        cancel: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamChunk]:
        ctx = LogContext(provider=model.provider, model=model.model_id)
        span = tracing.start_model_span(model.provider, model.model_id, options, streaming=True)
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", messages=len(options.messages))
        start = time.perf_counter()
        chunks = 0
        try:
            async for chunk in next_(options, cancel):
                chunks += 1
                if chunk.type is ChunkType.FINISH:
                    tracing.record_usage(span, chunk.usage, chunk.finish_reason.value if chunk.finish_reason else None)
                    normalized_log_event(
                        self._logger,
                        "stream.end",
                        ctx,
                        phase="finalize",
                        emitted=chunks > 1,
                        tokens=chunk.usage,
                        finish_reason=chunk.finish_reason.value if chunk.finish_reason else None,
                        chunks=chunks,
                        duration_ms=_elapsed_ms(start),
                    )
                elif chunk.type is ChunkType.ERROR:
                    normalized_log_event(
                        self._logger,
                        "stream.error",
                        ctx,
                        phase="finalize",
                        level=logging.ERROR,
                        emitted=chunks > 1,
                        error=chunk.error_message,
                        chunks=chunks,
                        duration_ms=_elapsed_ms(start),
                    )
                yield chunk
        except CancelledError:
            normalized_log_event(self._logger, "stream.cancelled", ctx, phase="cancelled", chunks=chunks)
            raise
        except Exception as exc:
            tracing.record_failure(span, exc)
            normalized_log_event(
                self._logger,
                "stream.error",
                ctx,
                phase="error",
                level=logging.ERROR,
                error_code=classify_exception(exc).value,
                error=str(exc),
                chunks=chunks,
                duration_ms=_elapsed_ms(start),
            )
            raise
        finally:
            span.end()


__all__ = ["LoggingMiddleware"]
