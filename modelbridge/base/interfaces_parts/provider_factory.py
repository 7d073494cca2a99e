"""ProviderFactory Protocol: builds models for one provider id."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .embedding_model import EmbeddingModel
from .language_model import LanguageModel


@runtime_checkable
class ProviderFactory(Protocol):
    @property
    def provider_id(self) -> str: ...

    def create_language_model(self, model_id: str) -> LanguageModel: ...

    def create_embedding_model(self, model_id: str) -> EmbeddingModel: ...


__all__ = ["ProviderFactory"]
