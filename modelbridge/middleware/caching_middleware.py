"""Result caching for single-shot generation.

Results of ``generate`` are stored as JSON under a key derived from the
provider, model id and every request field that can change the answer.
Streams pass through uncached. Provider metadata is not cached.
"""
from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from typing import Any, Dict, Optional

from ..base.cancellation import CancellationToken
from ..base.interfaces import LanguageModel
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event
from ..base.models import FinishReason, GenerateResult, LanguageModelCallOptions, ToolCall, Usage
from ..config import get_settings
from ..config.defaults import CACHE_KEY_PREFIX
from .cache_store import CacheStore, InMemoryCacheStore
from .middleware_base import GenerateNext, LanguageModelMiddleware


def cache_key(options: LanguageModelCallOptions, model: LanguageModel) -> str:
    """Deterministic key: prefix plus the SHA-256 of a canonical JSON request summary."""
    summary = {
        "provider": model.provider,
        "model": model.model_id,
        "messages": [{"role": m.role.value, "content": m.content, "name": m.name} for m in options.messages],
        "max_tokens": options.max_tokens,
        "temperature": options.temperature,
        "top_p": options.top_p,
        "top_k": options.top_k,
        "presence_penalty": options.presence_penalty,
        "frequency_penalty": options.frequency_penalty,
        "stop_sequences": list(options.stop_sequences) if options.stop_sequences else None,
        "seed": options.seed,
        "tools": [t.name for t in options.tools] if options.tools else None,
        "tool_choice": options.tool_choice,
        "response_format": options.response_format,
    }
    canonical = json.dumps(summary, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    return CACHE_KEY_PREFIX + hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def encode_result(result: GenerateResult) -> str:
    payload: Dict[str, Any] = {
        "finish_reason": result.finish_reason.value,
        "usage": asdict(result.usage),
        "text": result.text,
        "tool_calls": [asdict(c) for c in result.tool_calls] if result.tool_calls is not None else None,
        "warnings": list(result.warnings) if result.warnings is not None else None,
        "raw_finish_reason": result.raw_finish_reason,
    }
    return json.dumps(payload, ensure_ascii=False)


def decode_result(text: str) -> GenerateResult:
    payload = json.loads(text)
    tool_calls = payload.get("tool_calls")
    return GenerateResult(
        finish_reason=FinishReason(payload["finish_reason"]),
        usage=Usage(**payload.get("usage") or {}),
        text=payload.get("text"),
        tool_calls=tuple(ToolCall(**c) for c in tool_calls) if tool_calls is not None else None,
        warnings=payload.get("warnings"),
        raw_finish_reason=payload.get("raw_finish_reason"),
    )


class CachingMiddleware(LanguageModelMiddleware):
    """Serve repeated identical ``generate`` calls from a ``CacheStore``.

    Args:
        store: Backing store; defaults to an ``InMemoryCacheStore`` sized from settings.
        ttl_seconds: Entry lifetime; defaults to ``Settings.cache_ttl_seconds``.
    """

    def __init__(self, store: Optional[CacheStore] = None, ttl_seconds: Optional[float] = None) -> None:
        settings = get_settings()
        self._store = store if store is not None else InMemoryCacheStore(max_entries=settings.cache_max_entries)
        self._ttl = ttl_seconds if ttl_seconds is not None else settings.cache_ttl_seconds
        self._logger = get_logger("modelbridge.middleware.cache")

    @property
    def store(self) -> CacheStore:
        return self._store

    async def generate(
        self,
        options: LanguageModelCallOptions,
        model: LanguageModel,
        next_: GenerateNext,
        cancel: Optional[CancellationToken] = None,
    ) -> GenerateResult:
        key = cache_key(options, model)
        ctx = LogContext(provider=model.provider, model=model.model_id)
        cached = await self._store.get(key)
        if cached is not None:
            log_event(self._logger, "cache.hit", ctx, key=key)
            return decode_result(cached)
        log_event(self._logger, "cache.miss", ctx, key=key)
        result = await next_(options, cancel)
        await self._store.set(key, encode_result(result), self._ttl)
        return result


__all__ = ["CachingMiddleware", "cache_key", "encode_result", "decode_result"]
