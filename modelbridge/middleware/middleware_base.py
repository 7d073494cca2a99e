"""Base class for language model middleware.

A middleware wraps one call: it receives the call options, the wrapped model
(for provider/model identity only) and ``next_``, the continuation that runs
the rest of the chain. The base class passes everything through unchanged so
subclasses override only the hooks they need.

Per-call state must live in locals of ``generate``/``stream``; one middleware
instance serves concurrent calls.
"""

from __future__ import annotations

from typing import AsyncIterator, Awaitable, Callable, Optional

from ..base.cancellation import CancellationToken
from ..base.interfaces import LanguageModel
from ..base.models import GenerateResult, LanguageModelCallOptions, StreamChunk

GenerateNext = Callable[[LanguageModelCallOptions, Optional[CancellationToken]], Awaitable[GenerateResult]]
StreamNext = Callable[[LanguageModelCallOptions, Optional[CancellationToken]], AsyncIterator[StreamChunk]]


class LanguageModelMiddleware:
    """Pass-through middleware.

    Failure modes:
        Implementations may raise to abort the call. Errors coming from
        ``next_`` should be re-raised unchanged.
    """

    async def generate(
        self,
        options: LanguageModelCallOptions,
        model: LanguageModel,
        next_: GenerateNext,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerateResult:
        return await next_(options, cancel)

    def stream(
        self,
        options: LanguageModelCallOptions,
        model: LanguageModel,
        next_: StreamNext,
        cancel: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamChunk]:
        """Return the transformed chunk sequence.

        Overrides are typically ``async def`` generators that iterate
        ``next_(options, cancel)``; they must still end with exactly one
        terminal chunk.
        """
        return next_(options, cancel)


__all__ = ["LanguageModelMiddleware", "GenerateNext", "StreamNext"]
