"""Deterministic in-process models for offline use and tests.

Purpose
-------
Implement ``LanguageModel`` and ``EmbeddingModel`` without any network
traffic so higher layers (facade, middleware, registry) can be exercised
end to end. Responses are scripted by the caller; every call's options are
recorded for inspection.

Scripting
---------
- ``results``: ``GenerateResult`` objects returned by successive
  ``generate`` calls; the last one repeats once the script runs out.
- ``responder``: alternatively, a function of the call options returning a
  ``GenerateResult``. It takes precedence over ``results``.
- ``streams``: chunk sequences returned by successive ``stream`` calls, same
  repetition rule. Without them, ``stream`` splits the text of the next
  generate result into word deltas and ends with a ``FINISH`` chunk.
- ``error``: raised by every call, for failure-path tests.
"""

from __future__ import annotations

import asyncio
import hashlib
import math
import re
from typing import AsyncIterator, Callable, Dict, List, Mapping, Optional, Sequence

from ..base.cancellation import CancellationToken, raise_if_cancelled
from ..base.models import (
    BatchEmbeddingResult,
    EmbeddingOptions,
    EmbeddingResult,
    FinishReason,
    GenerateResult,
    LanguageModelCallOptions,
    StreamChunk,
    Usage,
)
from ..config.defaults import SPECIFICATION_VERSION

DEFAULT_TEXT = "This is a mock response."


def split_deltas(text: str) -> List[str]:
    """Split ``text`` into word-sized deltas that concatenate back to ``text``."""
    return re.findall(r"\S+\s*|\s+", text)


def _usage_for(options: LanguageModelCallOptions, text: str) -> Usage:
    prompt_tokens = sum(len(m.content.split()) for m in options.messages)
    output_tokens = len(text.split())
    return Usage(input_tokens=prompt_tokens, output_tokens=output_tokens, total_tokens=prompt_tokens + output_tokens)


class MockLanguageModel:
    """Scripted ``LanguageModel``.

    Attributes:
        calls: Options of every ``generate``/``stream`` call, in call order.
    """

    def __init__(
        self,
        *,
        provider: str = "mock",
        model_id: str = "mock-model",
        text: str = DEFAULT_TEXT,
        results: Optional[Sequence[GenerateResult]] = None,
        responder: Optional[Callable[[LanguageModelCallOptions], GenerateResult]] = None,
        streams: Optional[Sequence[Sequence[StreamChunk]]] = None,
        error: Optional[BaseException] = None,
        supported_urls: Optional[Mapping[str, Sequence[str]]] = None,
        chunk_delay: float = 0.0,
    ) -> None:
        self._provider = provider
        self._model_id = model_id
        self._text = text
        self._results = list(results or ())
        self._responder = responder
        self._streams = [list(s) for s in streams or ()]
        self._error = error
        self._supported_urls = dict(supported_urls or {})
        self._chunk_delay = chunk_delay
        self._generate_count = 0
        self._stream_count = 0
        self.calls: List[LanguageModelCallOptions] = []

    @property
    def specification_version(self) -> str:
        return SPECIFICATION_VERSION

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def supported_urls(self) -> Mapping[str, Sequence[str]]:
        return self._supported_urls

    @property
    def generate_count(self) -> int:
        return self._generate_count

    @property
    def stream_count(self) -> int:
        return self._stream_count

    def _next_result(self, options: LanguageModelCallOptions, index: int) -> GenerateResult:
        if self._responder is not None:
            return self._responder(options)
        if self._results:
            return self._results[min(index, len(self._results) - 1)]
        return GenerateResult(
            finish_reason=FinishReason.STOP, text=self._text, usage=_usage_for(options, self._text)
        )

    async def generate(
        self, options: LanguageModelCallOptions, cancel: Optional[CancellationToken] = None
    ) -> GenerateResult:
        self.calls.append(options)
        index = self._generate_count
        self._generate_count += 1
        raise_if_cancelled(cancel)
        await asyncio.sleep(0)
        if self._error is not None:
            raise self._error
        return self._next_result(options, index)

    def _script_for(self, options: LanguageModelCallOptions, index: int) -> List[StreamChunk]:
        if self._streams:
            return self._streams[min(index, len(self._streams) - 1)]
        result = self._next_result(options, index)
        chunks = [StreamChunk.text_delta(d) for d in split_deltas(result.text or "")]
        chunks.append(StreamChunk.finish(result.finish_reason, result.usage))
        return chunks

    async def stream(
        self, options: LanguageModelCallOptions, cancel: Optional[CancellationToken] = None
    ) -> AsyncIterator[StreamChunk]:
        self.calls.append(options)
        index = self._stream_count
        self._stream_count += 1
        raise_if_cancelled(cancel)
        if self._error is not None:
            raise self._error
        for chunk in self._script_for(options, index):
            await asyncio.sleep(self._chunk_delay)
            raise_if_cancelled(cancel)
            yield chunk


class MockEmbeddingModel:
    """Deterministic embeddings derived from a SHA-256 digest of the input, unit length."""

    def __init__(self, *, provider: str = "mock", model_id: str = "mock-embedding", dimensions: int = 8) -> None:
        if dimensions <= 0:
            raise ValueError("dimensions must be positive")
        self._provider = provider
        self._model_id = model_id
        self._dimensions = dimensions

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def model_id(self) -> str:
        return self._model_id

    @property
    def max_embeddings_per_call(self) -> Optional[int]:
        return None

    def _vector(self, value: str, dimensions: int) -> List[float]:
        raw: List[float] = []
        counter = 0
        while len(raw) < dimensions:
            digest = hashlib.sha256(f"{counter}:{value}".encode("utf-8")).digest()
            raw.extend((b - 127.5) / 127.5 for b in digest)
            counter += 1
        vector = raw[:dimensions]
        norm = math.sqrt(sum(v * v for v in vector)) or 1.0
        return [v / norm for v in vector]

    async def embed(
        self,
        value: str,
        options: Optional[EmbeddingOptions] = None,
        cancel: Optional[CancellationToken] = None,
    ) -> EmbeddingResult:
        raise_if_cancelled(cancel)
        dims = options.dimensions if options and options.dimensions else self._dimensions
        tokens = len(value.split())
        return EmbeddingResult(embedding=tuple(self._vector(value, dims)), usage=Usage(input_tokens=tokens, total_tokens=tokens))

    async def embed_many(
        self,
        values: Sequence[str],
        options: Optional[EmbeddingOptions] = None,
        cancel: Optional[CancellationToken] = None,
    ) -> BatchEmbeddingResult:
        results = [await self.embed(v, options, cancel) for v in values]
        tokens = sum(r.usage.input_tokens or 0 for r in results)
        return BatchEmbeddingResult(
            embeddings=tuple(r.embedding for r in results),
            usage=Usage(input_tokens=tokens, total_tokens=tokens),
        )


class MockProviderFactory:
    """``ProviderFactory`` producing mock models.

    ``models`` pre-seeds specific model ids (useful to hand a scripted model to
    a registry); other ids get a fresh ``MockLanguageModel``.
    """

    def __init__(self, provider_id: str = "mock", models: Optional[Dict[str, MockLanguageModel]] = None) -> None:
        self._provider_id = provider_id
        self._models = dict(models or {})

    @property
    def provider_id(self) -> str:
        return self._provider_id

    def create_language_model(self, model_id: str) -> MockLanguageModel:
        seeded = self._models.get(model_id)
        if seeded is not None:
            return seeded
        return MockLanguageModel(provider=self._provider_id, model_id=model_id)

    def create_embedding_model(self, model_id: str) -> MockEmbeddingModel:
        return MockEmbeddingModel(provider=self._provider_id, model_id=model_id)


__all__ = ["MockLanguageModel", "MockEmbeddingModel", "MockProviderFactory", "split_deltas"]
