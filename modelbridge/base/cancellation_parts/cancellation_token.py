"""Cooperative cancellation token.

One token is threaded through a whole logical call: the facade, every
middleware and the model all poll the same instance. Child tokens let a caller
cancel one branch of work without cancelling the parent.
"""

from __future__ import annotations

from threading import Lock
from typing import List, Optional

from .cancelled_error import CancelledError
from .state import State


class CancellationToken:
    """Thread-safe cancellation flag with parent to child cascading."""

    def __init__(self, *, parent: Optional["CancellationToken"] = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @classmethod
    def already_cancelled(cls, reason: Optional[str] = None) -> "CancellationToken":
        token = cls()
        token.cancel(reason)
        return token

    @property
    def cancelled(self) -> bool:
        return self._state.cancelled

    @property
    def reason(self) -> Optional[str]:
        return self._state.reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cancellation; idempotent. Cascades to linked children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` when cancellation was requested."""
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


def raise_if_cancelled(cancel: Optional[CancellationToken]) -> None:
    """Poll ``cancel`` when one was supplied."""
    if cancel is not None:
        cancel.raise_if_cancelled()


__all__ = ["CancellationToken", "raise_if_cancelled"]
