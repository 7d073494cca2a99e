"""Raised when model output cannot be parsed into the requested type."""
from __future__ import annotations

from typing import ClassVar, Optional

from .base_error import ModelBridgeError
from .error_kind import ErrorKind


class SchemaValidationError(ModelBridgeError):
    """Structured output failed to deserialize or validate.

    Attributes:
        raw_text: The text that failed to parse, as received from the model.
        target: Name of the requested output type.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.SCHEMA_VALIDATION

    def __init__(self, message: str, raw_text: Optional[str] = None, target: Optional[str] = None) -> None:
        super().__init__(message)
        self.raw_text = raw_text
        self.target = target


__all__ = ["SchemaValidationError"]
