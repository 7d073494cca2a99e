"""Offline mock models."""

from .client import MockEmbeddingModel, MockLanguageModel, MockProviderFactory, split_deltas

__all__ = ["MockLanguageModel", "MockEmbeddingModel", "MockProviderFactory", "split_deltas"]
