"""EmbeddingModel Protocol."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from ..cancellation import CancellationToken
from ..models import BatchEmbeddingResult, EmbeddingOptions, EmbeddingResult


@runtime_checkable
class EmbeddingModel(Protocol):
    """Turns text into vectors. ``embed_many`` preserves input order."""

    @property
    def provider(self) -> str: ...

    @property
    def model_id(self) -> str: ...

    @property
    def max_embeddings_per_call(self) -> Optional[int]: ...

    async def embed(
        self,
        value: str,
        options: Optional[EmbeddingOptions] = None,
        cancel: Optional[CancellationToken] = None,
    ) -> EmbeddingResult: ...

    async def embed_many(
        self,
        values: Sequence[str],
        options: Optional[EmbeddingOptions] = None,
        cancel: Optional[CancellationToken] = None,
    ) -> BatchEmbeddingResult: ...


__all__ = ["EmbeddingModel"]
