"""Abstract contracts (Protocols) for models, factories and tools."""

from .interfaces_parts.embedding_model import EmbeddingModel
from .interfaces_parts.language_model import LanguageModel
from .interfaces_parts.provider_factory import ProviderFactory
from .interfaces_parts.tool_executor import ToolExecutor

__all__ = ["LanguageModel", "EmbeddingModel", "ProviderFactory", "ToolExecutor"]
