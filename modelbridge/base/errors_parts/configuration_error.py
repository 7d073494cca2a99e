"""Raised for registry misuse: malformed model strings, unknown providers."""
from __future__ import annotations

from typing import ClassVar

from .base_error import ModelBridgeError
from .error_kind import ErrorKind


class ConfigurationError(ModelBridgeError):
    kind: ClassVar[ErrorKind] = ErrorKind.CONFIGURATION


__all__ = ["ConfigurationError"]
