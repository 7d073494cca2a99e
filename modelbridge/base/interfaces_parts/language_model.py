"""LanguageModel Protocol.

The contract every vendor adapter, decorator (``MiddlewareLanguageModel``) and
test double implements. Both operations accept an optional
``CancellationToken`` which implementations poll cooperatively.
"""

from __future__ import annotations

from typing import AsyncIterator, Mapping, Optional, Protocol, Sequence, runtime_checkable

from ..cancellation import CancellationToken
from ..models import GenerateResult, LanguageModelCallOptions, StreamChunk


@runtime_checkable
class LanguageModel(Protocol):
    """A callable text model.

    Attributes:
        specification_version: Version tag of the adapter contract.
        provider: Provider id (for example ``"openai"``).
        model_id: Model id within the provider.
        supported_urls: Media types mapped to URL patterns the model can fetch
            itself; empty when the model accepts inline data only.

    ``stream`` returns an async iterator producing zero or more delta chunks
    followed by exactly one terminal chunk. Vendor failures that happen after
    streaming started are reported as an ``ERROR`` chunk; failures before the
    first chunk may be raised instead.
    """

    @property
    def specification_version(self) -> str: ...

    @property
    def provider(self) -> str: ...

    @property
    def model_id(self) -> str: ...

    @property
    def supported_urls(self) -> Mapping[str, Sequence[str]]: ...

    async def generate(
        self, options: LanguageModelCallOptions, cancel: Optional[CancellationToken] = None
    ) -> GenerateResult: ...

    def stream(
        self, options: LanguageModelCallOptions, cancel: Optional[CancellationToken] = None
    ) -> AsyncIterator[StreamChunk]: ...


__all__ = ["LanguageModel"]
