"""Cancellation error type.

Raised by any operation that observes a cancellation request. It is never
converted into a terminal stream chunk; it always propagates to the caller.
"""

from __future__ import annotations

from typing import ClassVar

from ..errors_parts.error_kind import ErrorKind


class CancelledError(RuntimeError):
    """Cooperative cancellation was observed.

    Distinct from :class:`asyncio.CancelledError`, which signals task
    cancellation by the event loop.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.CANCELLED


__all__ = ["CancelledError"]
