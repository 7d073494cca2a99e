"""Convenience wrapper for attaching middleware to a model."""
from __future__ import annotations

from ..base.interfaces import LanguageModel
from .chain import MiddlewareLanguageModel
from .middleware_base import LanguageModelMiddleware


def with_middleware(model: LanguageModel, *middlewares: LanguageModelMiddleware) -> LanguageModel:
    """Wrap ``model`` with ``middlewares`` (outermost first).

    Wrapping a model that is already a ``MiddlewareLanguageModel`` appends to
    its chain instead of nesting: ``with_middleware(with_middleware(m, a), b)``
    behaves like ``with_middleware(m, a, b)``. With no middlewares the model is
    returned unchanged.
    """
    if not middlewares:
        return model
    if isinstance(model, MiddlewareLanguageModel):
        return MiddlewareLanguageModel(model.inner_model, [*model.middlewares, *middlewares])
    return MiddlewareLanguageModel(model, middlewares)


__all__ = ["with_middleware"]
