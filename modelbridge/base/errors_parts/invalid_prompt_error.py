"""Raised when a request has neither a prompt nor messages."""
from __future__ import annotations

from typing import ClassVar

from .base_error import ModelBridgeError
from .error_kind import ErrorKind


class InvalidPromptError(ModelBridgeError):
    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_PROMPT


__all__ = ["InvalidPromptError"]
