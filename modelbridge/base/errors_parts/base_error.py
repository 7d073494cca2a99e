"""Root exception for errors raised by the client layer itself."""
from __future__ import annotations

from typing import ClassVar

from .error_kind import ErrorKind


class ModelBridgeError(Exception):
    """Base class; subclasses override ``kind``."""

    kind: ClassVar[ErrorKind] = ErrorKind.PROVIDER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


__all__ = ["ModelBridgeError"]
