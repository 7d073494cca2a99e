"""
Provider registry resolving ``"provider/model"`` strings to models.

Purpose
-------
Keep the provider set open: vendor adapters ship a ``ProviderFactory`` and
are registered on an explicit ``ProviderRegistry`` instance at startup. There
is no global registry; pass the instance to whatever needs to resolve models.

Semantics
---------
- Provider ids are case-insensitive; re-registering an id replaces the
  previous factory.
- Model strings split at the first ``/``; the model segment may itself contain
  slashes (``"openrouter/meta/llama-3"``).
- Every resolution asks the factory for a new model; nothing is cached here.

Concurrency
-----------
Registration swaps in a new factory table under a lock; lookups read the
current table without locking.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Iterable, List, Optional, Tuple

from ..base.errors import ConfigurationError
from ..base.interfaces import EmbeddingModel, LanguageModel, ProviderFactory
from ..base.log_support import LogContext
from ..base.logging import get_logger, log_event

MODEL_SEPARATOR = "/"


def parse_model_string(model_string: str) -> Tuple[str, str]:
    """Split ``"provider/model"`` at the first separator.

    Raises:
        ConfigurationError: No separator, or an empty provider or model segment.
    """
    provider_id, sep, model_id = (model_string or "").partition(MODEL_SEPARATOR)
    if not sep or not provider_id or not model_id:
        raise ConfigurationError(
            f"Invalid model string '{model_string}'. Expected format: 'provider/model-id'."
        )
    return provider_id, model_id


class ProviderRegistry:
    """Explicit, instance-scoped table of provider factories."""

    def __init__(self, factories: Optional[Iterable[ProviderFactory]] = None) -> None:
        self._factories: Dict[str, ProviderFactory] = {}
        self._lock = Lock()
        self._logger = get_logger("modelbridge.registry")
        for factory in factories or ():
            self.register(factory)

    def register(self, factory: ProviderFactory) -> "ProviderRegistry":
        """Register ``factory`` under its provider id; returns ``self`` for chaining."""
        provider_id = (factory.provider_id or "").strip()
        if not provider_id:
            raise ConfigurationError("Provider factory must declare a non-empty provider_id.")
        with self._lock:
            table = dict(self._factories)
            replaced = provider_id.casefold() in table
            table[provider_id.casefold()] = factory
            self._factories = table
        log_event(self._logger, "registry.register", LogContext(provider=provider_id), replaced=replaced)
        return self

    def has_provider(self, provider_id: str) -> bool:
        return provider_id.casefold() in self._factories

    @property
    def provider_ids(self) -> List[str]:
        """Registered ids as declared by their factories, in registration order."""
        return [f.provider_id for f in self._factories.values()]

    def _factory_for(self, provider_id: str) -> ProviderFactory:
        factory = self._factories.get(provider_id.casefold())
        if factory is None:
            known = self.provider_ids
            available = ", ".join(known) if known else "none"
            raise ConfigurationError(
                f"Provider '{provider_id}' is not registered. Available providers: {available}."
            )
        return factory

    def language_model(self, model_string: str) -> LanguageModel:
        """Build the language model named by ``model_string``.

        Raises:
            ConfigurationError: Malformed string or unknown provider.
        """
        provider_id, model_id = parse_model_string(model_string)
        model = self._factory_for(provider_id).create_language_model(model_id)
        log_event(self._logger, "registry.resolve", LogContext(provider=provider_id, model=model_id), kind="language")
        return model

    def embedding_model(self, model_string: str) -> EmbeddingModel:
        """Build the embedding model named by ``model_string``."""
        provider_id, model_id = parse_model_string(model_string)
        model = self._factory_for(provider_id).create_embedding_model(model_id)
        log_event(self._logger, "registry.resolve", LogContext(provider=provider_id, model=model_id), kind="embedding")
        return model


__all__ = ["ProviderRegistry", "parse_model_string", "MODEL_SEPARATOR"]
