"""Middleware composition around a language model.

``MiddlewareLanguageModel`` is itself a ``LanguageModel``. For middlewares
``[A, B]`` a call runs A's request side, then B's, then the inner model; the
response flows back through B and then A. Continuations are built fresh for
every call and closed over explicitly, so no state is shared between
concurrent invocations.
"""
from __future__ import annotations

from typing import AsyncIterator, Mapping, Optional, Sequence, Tuple

from ..base.cancellation import CancellationToken
from ..base.interfaces import LanguageModel
from ..base.models import GenerateResult, LanguageModelCallOptions, StreamChunk
from .middleware_base import GenerateNext, LanguageModelMiddleware, StreamNext


class MiddlewareLanguageModel:
    """Decorates ``inner`` with an ordered middleware chain.

    Attributes:
        inner_model: The wrapped model.
        middlewares: Middlewares in outermost-first order.
    """

    def __init__(self, inner: LanguageModel, middlewares: Sequence[LanguageModelMiddleware]) -> None:
        self._inner = inner
        self._middlewares: Tuple[LanguageModelMiddleware, ...] = tuple(middlewares)

    @property
    def inner_model(self) -> LanguageModel:
        return self._inner

    @property
    def middlewares(self) -> Tuple[LanguageModelMiddleware, ...]:
        return self._middlewares

    @property
    def specification_version(self) -> str:
        return self._inner.specification_version

    @property
    def provider(self) -> str:
        return self._inner.provider

    @property
    def model_id(self) -> str:
        return self._inner.model_id

    @property
    def supported_urls(self) -> Mapping[str, Sequence[str]]:
        return self._inner.supported_urls

    def _generate_link(self, middleware: LanguageModelMiddleware, next_: GenerateNext) -> GenerateNext:
        async def call(options: LanguageModelCallOptions, cancel: Optional[CancellationToken]) -> GenerateResult:
            return await middleware.generate(options, self._inner, next_, cancel)

        return call

    def _stream_link(self, middleware: LanguageModelMiddleware, next_: StreamNext) -> StreamNext:
        def call(options: LanguageModelCallOptions, cancel: Optional[CancellationToken]) -> AsyncIterator[StreamChunk]:
            return middleware.stream(options, self._inner, next_, cancel)

        return call

    async def generate(
        self, options: LanguageModelCallOptions, cancel: Optional[CancellationToken] = None
    ) -> GenerateResult:
        next_: GenerateNext = self._inner.generate
        for middleware in reversed(self._middlewares):
            next_ = self._generate_link(middleware, next_)
        return await next_(options, cancel)

    def stream(
        self, options: LanguageModelCallOptions, cancel: Optional[CancellationToken] = None
    ) -> AsyncIterator[StreamChunk]:
        next_: StreamNext = self._inner.stream
        for middleware in reversed(self._middlewares):
            next_ = self._stream_link(middleware, next_)
        return next_(options, cancel)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        names = ", ".join(type(m).__name__ for m in self._middlewares)
        return f"MiddlewareLanguageModel({self.provider}/{self.model_id}, [{names}])"


__all__ = ["MiddlewareLanguageModel"]
