"""ProviderFactory built from plain callables."""

from __future__ import annotations

from typing import Callable, Optional

from ..base.errors import ConfigurationError
from ..base.interfaces import EmbeddingModel, LanguageModel


class CallableProviderFactory:
    """Adapt ``model_id -> model`` callables to the ``ProviderFactory`` protocol.

    Example::

        registry.register(CallableProviderFactory("local", lambda mid: LocalModel(mid)))
    """

    def __init__(
        self,
        provider_id: str,
        language_model: Callable[[str], LanguageModel],
        embedding_model: Optional[Callable[[str], EmbeddingModel]] = None,
    ) -> None:
        self._provider_id = provider_id
        self._language_model = language_model
        self._embedding_model = embedding_model

    @property
    def provider_id(self) -> str:
        return self._provider_id

    def create_language_model(self, model_id: str) -> LanguageModel:
        return self._language_model(model_id)

    def create_embedding_model(self, model_id: str) -> EmbeddingModel:
        if self._embedding_model is None:
            raise ConfigurationError(f"Provider '{self._provider_id}' does not provide embedding models.")
        return self._embedding_model(model_id)


__all__ = ["CallableProviderFactory"]
