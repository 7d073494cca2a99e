"""
Normalized provider failure codes.

``ErrorCode`` refines ``ErrorKind.PROVIDER`` failures for logs and analytics.
Values are lowercase snake_case and form a stable contract for log consumers.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
