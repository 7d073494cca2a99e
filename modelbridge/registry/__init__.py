"""Provider registry and factory helpers."""

from .callable_factory import CallableProviderFactory
from .provider_registry import ProviderRegistry, parse_model_string

__all__ = ["ProviderRegistry", "CallableProviderFactory", "parse_model_string"]
