"""Embedding request and result DTOs."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from .usage import Usage


@dataclass(frozen=True)
class EmbeddingOptions:
    dimensions: Optional[int] = None
    provider_options: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class EmbeddingResult:
    embedding: Sequence[float]
    usage: Usage = field(default_factory=Usage)


@dataclass(frozen=True)
class BatchEmbeddingResult:
    """Embeddings in the same order as the inputs."""

    embeddings: Sequence[Sequence[float]]
    usage: Usage = field(default_factory=Usage)


__all__ = ["EmbeddingOptions", "EmbeddingResult", "BatchEmbeddingResult"]
