"""
Provider failure wrapper.

Adapters raise ``ProviderError`` when a vendor call fails so that the client
layer can log a normalized ``ErrorCode`` without knowing vendor exception
types. The kind is always ``ErrorKind.PROVIDER``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .error_code import ErrorCode
from .error_kind import ErrorKind


@dataclass
class ProviderError(Exception):
    """A vendor failure with a normalized code.

    Attributes:
        code: Normalized classification.
        message: Human-readable message suitable for logging.
        provider: Provider id where the failure originated.
        model: Model id associated with the failure, when known.
        retryable: Hint for callers that implement retries.
        raw: The original exception, for diagnostics.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.PROVIDER

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
