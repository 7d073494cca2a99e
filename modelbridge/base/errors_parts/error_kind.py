"""
Error kinds raised by the client layer.

Each exception type raised by the library declares one ``ErrorKind`` as a
class attribute named ``kind``. Callers branch on the kind (see
``modelbridge.base.errors.error_kind``) instead of on exception class names.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PROMPT = "invalid_prompt"
    CONFIGURATION = "configuration"
    TOOL_INVOCATION = "tool_invocation"
    SCHEMA_VALIDATION = "schema_validation"
    PROVIDER = "provider"
    CANCELLED = "cancelled"


__all__ = ["ErrorKind"]
