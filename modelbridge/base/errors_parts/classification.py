"""
Exception classification helpers.

``classify_exception`` maps arbitrary exceptions to an ``ErrorCode`` for
logging. ``error_kind``/``is_error_kind`` read the ``kind`` discriminant that
every library exception declares.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .error_code import ErrorCode
from .error_kind import ErrorKind
from .provider_error import ProviderError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Find an HTTP status on ``status_code``, ``status`` or ``response.status_code``."""
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

_KIND_MAP: Dict[ErrorKind, ErrorCode] = {
    ErrorKind.INVALID_PROMPT: ErrorCode.VALIDATION,
    ErrorKind.SCHEMA_VALIDATION: ErrorCode.VALIDATION,
    ErrorKind.CONFIGURATION: ErrorCode.NOT_FOUND,
    ErrorKind.TOOL_INVOCATION: ErrorCode.VALIDATION,
    ErrorKind.CANCELLED: ErrorCode.CANCELLED,
}

_MESSAGE_PATTERNS = (
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key")),
    (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.UNAVAILABLE, ("unavailable",)),
    (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in _MESSAGE_PATTERNS:
        if any(p in msg for p in patterns):
            return code
    return None


def error_kind(exc: BaseException) -> Optional[ErrorKind]:
    """Return the ``ErrorKind`` declared by ``exc``'s type, or ``None``."""
    kind = getattr(type(exc), "kind", None)
    return kind if isinstance(kind, ErrorKind) else None


def is_error_kind(exc: BaseException, kind: ErrorKind) -> bool:
    return error_kind(exc) is kind


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into an :class:`ErrorCode`.

    Precedence:
        1. ``ProviderError`` passthrough.
        2. Library error kinds.
        3. Timeouts.
        4. HTTP status mapping.
        5. Message heuristics, then ``UNKNOWN``.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    kind = error_kind(exc)
    if kind is not None and kind in _KIND_MAP:
        return _KIND_MAP[kind]
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, asyncio.CancelledError):
        return ErrorCode.CANCELLED
    status = _extract_status(exc)
    if status is not None and status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = ["classify_exception", "error_kind", "is_error_kind"]
