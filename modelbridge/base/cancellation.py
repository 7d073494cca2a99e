"""Cooperative cancellation primitives.

``CancellationToken`` is passed to every model, middleware and facade call;
operations that observe a cancelled token raise ``CancelledError``.
"""

from .cancellation_parts.cancellation_token import CancellationToken, raise_if_cancelled
from .cancellation_parts.cancelled_error import CancelledError

__all__ = ["CancellationToken", "CancelledError", "raise_if_cancelled"]
