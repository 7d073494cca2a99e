"""Middleware composition and the built-in middlewares."""

from .cache_store import CacheStore, InMemoryCacheStore
from .caching_middleware import CachingMiddleware
from .chain import MiddlewareLanguageModel
from .extensions import with_middleware
from .logging_middleware import LoggingMiddleware
from .middleware_base import GenerateNext, LanguageModelMiddleware, StreamNext

__all__ = [
    "LanguageModelMiddleware",
    "GenerateNext",
    "StreamNext",
    "MiddlewareLanguageModel",
    "with_middleware",
    "LoggingMiddleware",
    "CachingMiddleware",
    "CacheStore",
    "InMemoryCacheStore",
]
